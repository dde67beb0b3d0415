import contextlib
import logging
import struct

import lief

from clear2mangled.common.C2mExceptions import ImageParseError, NoExportsError, TargetFileError
from clear2mangled.common.RawExport import RawExport

lief.logging.disable()

LOG = logging.getLogger(__name__)


class PeExportLoader(object):

    @staticmethod
    def isCompatible(data):
        return data[:2] == b"MZ"

    @staticmethod
    def getPeOffset(binary):
        if len(binary) >= 0x40:
            pe_offset = struct.unpack("H", binary[0x3c:0x3c + 2])[0]
            return pe_offset
        return 0

    @staticmethod
    def openAndGetExports(file_path):
        try:
            with open(file_path, "rb") as fin:
                header = fin.read(0x40)
        except OSError as exc:
            raise TargetFileError("failed to open \"{}\": {}".format(file_path, exc)) from exc
        if not PeExportLoader.isCompatible(header) or not PeExportLoader.getPeOffset(header):
            raise ImageParseError("failed to parse the target PE file.")
        lief_binary = lief.PE.parse(file_path)
        if lief_binary is None:
            raise ImageParseError("failed to parse the target PE file.")
        return PeExportLoader.parseExports(lief_binary)

    @staticmethod
    def parseExports(lief_binary):
        if not lief_binary.has_exports:
            raise NoExportsError("target file does not have exports.")
        raw_exports = []
        for entry in lief_binary.get_export().entries:
            export_name = ""
            with contextlib.suppress(UnicodeDecodeError, AttributeError):
                # names with broken encodings are skipped, as in the symbol providers
                export_name = entry.name
            if not export_name:
                LOG.debug("Skipping unnamed export with ordinal %d", entry.ordinal)
                continue
            raw_exports.append(RawExport(entry.ordinal, entry.address, export_name))
        LOG.debug("Read %d named exports from export table", len(raw_exports))
        return raw_exports
