#!/usr/bin/python

import logging
import shutil
import subprocess

from clear2mangled.common.C2mExceptions import DemanglerError

from .AbstractDemangler import AbstractDemangler

LOGGER = logging.getLogger(__name__)


class UndnameDemangler(AbstractDemangler):
    """ Demangles MSVC symbols by running undname.exe once per symbol """

    def __init__(self, config):
        self._config = config
        self._undname_path = config.UNDNAME_PATH
        self._marker = config.UNDNAME_MARKER

    def isAvailable(self):
        return shutil.which(self._undname_path) is not None

    def demangle(self, mangled_name):
        try:
            process = subprocess.run(
                [self._undname_path, mangled_name],
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            raise DemanglerError("failed to run \"{}\": {}".format(self._undname_path, exc)) from exc
        output = process.stdout.decode("utf-8", errors="replace")
        return self.parseOutput(output)

    def parseOutput(self, output):
        """ undname prints one line per variant: is :- "<declaration>" """
        candidates = []
        for line in output.splitlines():
            marker_pos = line.find(self._marker)
            if marker_pos == -1:
                continue
            payload_start = marker_pos + len(self._marker)
            payload_end = line.rfind("\"")
            if payload_end < payload_start:
                LOGGER.debug("undname output line without closing quote: %s", line)
                continue
            candidates.append(line[payload_start:payload_end])
        return candidates
