import json
import logging
import os

from clear2mangled.common.C2mExceptions import CacheFileError
from clear2mangled.common.ExportIndex import ExportIndex

LOG = logging.getLogger(__name__)


class ExportCache(object):
    """ JSON side-file holding the full ExportIndex of one binary, keyed by its file name """

    def __init__(self, config):
        self._cache_path = config.CACHE_PATH

    def getCachePath(self, file_path):
        return os.path.join(self._cache_path, os.path.basename(file_path) + ".json")

    def hasCache(self, file_path):
        return os.path.isfile(self.getCachePath(file_path))

    @staticmethod
    def save(export_index, cache_file_path):
        cache_dir = os.path.dirname(cache_file_path)
        try:
            if cache_dir:
                os.makedirs(cache_dir, exist_ok=True)
            with open(cache_file_path, "w") as fout:
                json.dump(export_index.toDict(), fout, indent=1, sort_keys=True)
        except OSError as exc:
            raise CacheFileError("failed to open cache file \"{}\": {}".format(cache_file_path, exc)) from exc
        LOG.info("Wrote %d exports to cache file %s", len(export_index), cache_file_path)

    @staticmethod
    def load(cache_file_path):
        try:
            with open(cache_file_path, "r") as fin:
                index_list = json.load(fin)
        except OSError as exc:
            raise CacheFileError("failed to open cache file \"{}\": {}".format(cache_file_path, exc)) from exc
        except ValueError as exc:
            raise CacheFileError("failed to parse json file \"{}\": {}".format(cache_file_path, exc)) from exc
        if not isinstance(index_list, list):
            raise CacheFileError("failed to parse json file \"{}\": top level is not an array".format(cache_file_path))
        filename = os.path.basename(cache_file_path)
        if filename.endswith(".json"):
            filename = filename[:-len(".json")]
        try:
            export_index = ExportIndex.fromDict(index_list, filename=filename)
        except (KeyError, TypeError, ValueError) as exc:
            raise CacheFileError("malformed export record in \"{}\": {}".format(cache_file_path, exc)) from exc
        LOG.info("Loaded %d exports from cache file %s", len(export_index), cache_file_path)
        return export_index
