class LookupResult(object):
    """Outcome of one query against an ExportIndex, an empty result is a regular "not found" """

    def __init__(self, query, exports=None, details=None, rva=None, base_addr=None, distances=None):
        self.query = query
        self.details = details
        self.rva = rva
        self.base_addr = base_addr
        self.exports = list(exports) if exports is not None else []
        # edit distance per export, only set for fuzzy queries
        self.distances = list(distances) if distances is not None else None

    def isEmpty(self):
        return not self.exports

    def __bool__(self):
        return not self.isEmpty()

    def __len__(self):
        return len(self.exports)

    def __iter__(self):
        return iter(self.exports)

    def __str__(self):
        if self.isEmpty():
            if self.rva is not None:
                return "mangled name of rva \"{:x}\" not found".format(self.rva)
            return "mangled name of \"{}\" not found".format(self.query)
        return "{} match(es) for \"{}\"".format(len(self.exports), self.query)
