from typing import Iterator, List

from .Export import Export


class ExportIndex(object):
    """ all Export records of one binary, in export table order """

    filename = None

    def __init__(self, filename="", exports=None):
        self.filename = filename
        self._exports = list(exports) if exports is not None else []

    def addExports(self, exports):
        self._exports.extend(exports)

    def getExports(self) -> List[Export]:
        return list(self._exports)

    @property
    def num_exports(self):
        return len(self._exports)

    @property
    def num_symbols(self):
        return len({export.ordinal for export in self._exports})

    def __iter__(self) -> Iterator[Export]:
        return iter(self._exports)

    def __len__(self):
        return len(self._exports)

    @classmethod
    def fromDict(cls, index_list, filename=""):
        return cls(filename, [Export.fromDict(export_dict) for export_dict in index_list])

    def toDict(self) -> list:
        return [export.toDict() for export in self._exports]

    def __eq__(self, other):
        if not isinstance(other, ExportIndex):
            return NotImplemented
        return self._exports == other._exports

    def __str__(self):
        return "{}: {} exports from {} symbols".format(self.filename, self.num_exports, self.num_symbols)
