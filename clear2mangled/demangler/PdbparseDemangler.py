#!/usr/bin/python

import logging

from clear2mangled.common.C2mExceptions import DemanglerError

from .AbstractDemangler import AbstractDemangler

LOGGER = logging.getLogger(__name__)

try:
    from pdbparse.undname import undname
except ImportError:
    undname = None
    LOGGER.debug("3rd party library pdbparse (use fork @ https://github.com/VPaulV/pdbparse) not installed - won't be able to demangle symbols in-process.")


class PdbparseDemangler(AbstractDemangler):
    """ In-process MSVC demangling through pdbparse's undname binding """

    def __init__(self, config):
        self._config = config

    def isAvailable(self):
        return undname is not None

    def demangle(self, mangled_name):
        if undname is None:
            raise DemanglerError("pdbparse is not installed, cannot demangle \"{}\" in-process".format(mangled_name))
        try:
            demangled_name = undname(mangled_name)
        except (ValueError, UnicodeDecodeError) as exc:
            LOGGER.debug("pdbparse failed to demangle %s: %s", mangled_name, exc)
            return []
        if isinstance(demangled_name, bytes):
            demangled_name = demangled_name.decode("utf-8", errors="replace")
        # undecorated names are returned as they are, just like undname.exe does for C exports
        return [demangled_name] if demangled_name else []
