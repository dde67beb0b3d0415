import datetime
import logging
import os

from clear2mangled.C2mConfig import C2mConfig
from clear2mangled.common.C2mExceptions import TargetFileError
from clear2mangled.common.Export import Export
from clear2mangled.common.ExportIndex import ExportIndex
from clear2mangled.declaration.DeclarationNormalizer import normalize
from clear2mangled.declaration.DeclarationParser import DeclarationParser
from clear2mangled.demangler import getDemangler
from clear2mangled.utility.ExportCache import ExportCache
from clear2mangled.utility.PeExportLoader import PeExportLoader

LOGGER = logging.getLogger(__name__)


class ExportIndexBuilder:
    """Turns the export table of a PE file into an ExportIndex, either freshly via demangling or from the cache"""

    def __init__(self, config=None, demangler=None, export_source=None):
        if config is None:
            config = C2mConfig()
        self.config = config
        self.demangler = demangler if demangler is not None else getDemangler(config)
        self.export_source = export_source if export_source is not None else PeExportLoader
        self.parser = DeclarationParser(config)
        self.cache = ExportCache(config)

    def _getDurationInSeconds(self, start_ts, end_ts):
        return (end_ts - start_ts).seconds + ((end_ts - start_ts).microseconds / 1000000.0)

    def buildExports(self, raw_export, candidates):
        exports = []
        for candidate in candidates:
            if not candidate:
                continue
            clear_declaration = normalize(candidate)
            details = self.parser.parse(clear_declaration)
            exports.append(Export(raw_export.ordinal, raw_export.rva, raw_export.mangled_name, clear_declaration, details))
        return exports

    def buildIndex(self, file_path):
        start = datetime.datetime.now(datetime.timezone.utc)
        raw_exports = self.export_source.openAndGetExports(file_path)
        LOGGER.info("Generating export index for %d exports of %s, this may take some time...", len(raw_exports), file_path)
        export_index = ExportIndex(os.path.basename(file_path))
        for raw_export in raw_exports:
            candidates = self.demangler.demangle(raw_export.mangled_name)
            if not candidates:
                LOGGER.debug("No demangled candidates for %s (ordinal %d)", raw_export.mangled_name, raw_export.ordinal)
            export_index.addExports(self.buildExports(raw_export, candidates))
        duration = self._getDurationInSeconds(start, datetime.datetime.now(datetime.timezone.utc))
        LOGGER.info("Built %d export records in %5.2fs", len(export_index), duration)
        return export_index

    def loadIndex(self, file_path, use_cache=None):
        """
        Return the ExportIndex for the given binary.
        With caching enabled, an existing cache file is loaded as is, otherwise the index is built and stored.
        """
        if use_cache is None:
            use_cache = self.config.USE_CACHE
        if not os.path.isfile(file_path):
            raise TargetFileError("file \"{}\" does not exist.".format(file_path))
        if not use_cache:
            LOGGER.info("Cache disabled, cache file won't be generated")
            return self.buildIndex(file_path)
        cache_file_path = self.cache.getCachePath(file_path)
        if self.cache.hasCache(file_path):
            return self.cache.load(cache_file_path)
        export_index = self.buildIndex(file_path)
        self.cache.save(export_index, cache_file_path)
        return export_index
