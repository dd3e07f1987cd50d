class RebalanceError(ValueError):
    """Raised when the rebalancing engine cannot produce a split"""
    pass

class LengthMismatchError(RebalanceError):
    """Raised when parallel sequences differ in length"""
    pass

class DegenerateAllocationError(RebalanceError):
    """Raised when an allocation would divide by a zero total"""
    pass
