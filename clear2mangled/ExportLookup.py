import logging

from clear2mangled.C2mConfig import C2mConfig
from clear2mangled.common.LookupResult import LookupResult
from clear2mangled.declaration.DeclarationNormalizer import normalize
from clear2mangled.declaration.DeclarationParser import DeclarationParser
from clear2mangled.utility.helpers import get_scoped_template_fragments, levenshtein_distance

LOGGER = logging.getLogger(__name__)


class ExportLookup(object):
    """ read-only queries against an already built or loaded ExportIndex """

    def __init__(self, export_index, config=None):
        if config is None:
            config = C2mConfig()
        self._config = config
        self._export_index = export_index
        self._parser = DeclarationParser(config)

    def parseQuery(self, declaration):
        return self._parser.parse(normalize(declaration))

    def findByDeclaration(self, declaration):
        # overloads share name and flags, so all of them are returned together
        details = self.parseQuery(declaration)
        matches = [export for export in self._export_index if details.matches(export.declaration_details)]
        LOGGER.debug("%d matches for declaration %r (name: %r)", len(matches), declaration, details.name)
        return LookupResult(declaration, matches, details=details)

    def findByRva(self, rva):
        matches = [export for export in self._export_index if export.rva == rva]
        return LookupResult("0x{:x}".format(rva), matches, rva=rva)

    def findByAddress(self, base_addr, address):
        rva = (address - base_addr) & self._config.ADDRESS_MASK
        result = self.findByRva(rva)
        result.query = "0x{:x}".format(address)
        result.base_addr = base_addr
        return result

    def findByFuzzyDeclaration(self, declaration, max_distance=None):
        """
        Approximate matching on the clear declarations, results are ordered by edit distance.
        Candidates need the same sequence of "::name<arg" fragments as the query, declarations
        without such fragments are only matched against C exports by their exact name.
        """
        if max_distance is None:
            max_distance = self._config.FUZZY_MAX_DISTANCE
        query_fragments = get_scoped_template_fragments(declaration)
        if not query_fragments:
            matches = [export for export in self._export_index
                       if export.clear_declaration == export.mangled_declaration and export.mangled_declaration == declaration]
            return LookupResult(declaration, matches)
        scored = []
        for export in self._export_index:
            if get_scoped_template_fragments(export.clear_declaration) != query_fragments:
                continue
            distance = levenshtein_distance(export.clear_declaration, declaration)
            if distance < max_distance:
                scored.append((distance, export))
        scored.sort(key=lambda item: item[0])
        return LookupResult(declaration, [export for _, export in scored], distances=[distance for distance, _ in scored])
