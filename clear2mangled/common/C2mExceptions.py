class C2mError(Exception):
    """Base for all failures that abort a clear2mangled run"""
    pass


class TargetFileError(C2mError):
    """The binary to index does not exist or cannot be read"""
    pass


class CacheFileError(C2mError):
    """The export cache side-file cannot be opened, written or parsed"""
    pass


class ImageParseError(C2mError):
    """The target file cannot be parsed as a PE image"""
    pass


class NoExportsError(C2mError):
    """The PE image has no export table"""
    pass


class DemanglerError(C2mError):
    """The demangling backend cannot be invoked"""
    pass


class ModeError(C2mError):
    """Invalid combination of command line options"""
    pass
