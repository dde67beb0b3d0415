import os
import logging


class C2mConfig(object):

    # note to self: always change this in setup.py as well.
    VERSION = "1.2.0"

    ### Logging
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)-15s: %(name)-32s - %(message)s"

    ### Export cache
    # one JSON side-file per binary: <CACHE_PATH>/<file name>.json
    CACHE_PATH = "." + os.sep + "cache"
    USE_CACHE = True

    ### Demangling
    # "undname" (undname.exe subprocess) or "pdbparse" (in-process)
    DEMANGLER = "undname"
    UNDNAME_PATH = "undname.exe"
    UNDNAME_MARKER = "is :- \""

    ### Declaration parsing
    # a declaration without parameter list is only treated as C function if it contains none of these
    C_FUNCTION_REJECT_CHARS = " <>:"
    # allow a leading ~ in the resolved name, required to detect destructors like N::~N
    NAME_ALLOW_TILDE = True

    ### Lookup
    FUZZY_MAX_DISTANCE = 100
    # relative addresses wrap around like uintptr_t
    ADDRESS_MASK = 0xFFFFFFFFFFFFFFFF

    ### Batch processing
    SCRIPT_INTERPRETER = "python"
