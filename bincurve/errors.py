class BincurveError(Exception):
    pass

class InvalidDimensions(BincurveError):
    '''Grid or curve size unusable for the requested operation'''
    pass

class InvalidRange(BincurveError):
    '''Trim lengths do not fit inside the input buffer'''
    pass

class IoFailure(BincurveError):
    pass
