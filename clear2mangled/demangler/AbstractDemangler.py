#!/usr/bin/python

from abc import abstractmethod

import logging
LOGGER = logging.getLogger(__name__)


class AbstractDemangler:

    def __init__(self, config):
        raise NotImplementedError

    @abstractmethod
    def isAvailable(self):
        """Returns whether the demangling backend can be invoked in the current environment"""
        return False

    @abstractmethod
    def demangle(self, mangled_name):
        """Return all human readable candidate declarations for the given linker symbol (possibly none), raise DemanglerError if the backend cannot be invoked"""
        raise NotImplementedError
