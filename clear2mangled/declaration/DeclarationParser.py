import logging
import re

from clear2mangled.C2mConfig import C2mConfig
from clear2mangled.common.DeclarationDetails import DeclarationDetails

from .BalancedRegionScanner import BalancedRegionScanner

LOGGER = logging.getLogger(__name__)

CONSTRUCTOR_CLOSURE = "default_constructor_closure"
VBASE_DESTRUCTOR = "vbase_destructor"
# separates the "*" of a function pointer from the variable name: "(* ExportedVariable)"
POINTER_NAME_SEPARATOR = "* "
NAME_CHARS = r"[\w<> +=\-/*]+"


class DeclarationParser(object):
    """
    Shallow structural classification of normalized demangled declarations.
    This is no C++ front end, it only derives what is needed for name based lookups:
    C function / variable / C++ function, constructor / destructor, and the bare name.
    """

    def __init__(self, config=None):
        if config is None:
            config = C2mConfig()
        self._config = config
        tilde = "~?" if config.NAME_ALLOW_TILDE else ""
        # a scope separator or a space, followed by the (unqualified) name
        self._name_pattern = re.compile(r"(::| )" + tilde + NAME_CHARS)

    def parse(self, declaration):
        details = DeclarationDetails()
        spans = BalancedRegionScanner.findTopLevelSpans(declaration, "(", ")")
        details.parentheses_pairs = [declaration[start:end] for start, end in spans]
        if not spans:
            if self._looksLikeCIdentifier(declaration):
                details.c_function = True
                details.name = declaration
            else:
                # qualified or templated but no call syntax, some kind of data symbol
                details.variable = True
                details.name = self.resolveName(declaration)
        else:
            first_start, _ = spans[0]
            if first_start > 0 and declaration[first_start - 1] == " ":
                # function pointer variable, e.g. "int (* ExportedVariable)(int)"
                details.variable = True
                details.name = self._extractPointerName(details.parentheses_pairs[0])
            else:
                details.name = self.resolveName(declaration[:first_start])
        details.name = self._cleanName(details.name)
        details.constructor_function = details.name == CONSTRUCTOR_CLOSURE
        details.destructor_function = "~" in details.name or details.name == VBASE_DESTRUCTOR
        LOGGER.debug("parsed %r -> %r", declaration, details)
        return details

    def resolveName(self, fragment):
        """ drop template arguments and return the innermost scope segment, still carrying its separator """
        fragment = BalancedRegionScanner.removeTopLevelRegions(fragment, "<", ">")
        last_match = ""
        for match in self._name_pattern.finditer(fragment):
            last_match = match.group(0)
        return last_match

    def _looksLikeCIdentifier(self, declaration):
        return not any(char in declaration for char in self._config.C_FUNCTION_REJECT_CHARS)

    def _extractPointerName(self, pointer_group):
        """ everything after the first "* " up to the end of the group, closing parenthesis included """
        separator_pos = pointer_group.find(POINTER_NAME_SEPARATOR)
        if separator_pos == -1:
            return pointer_group[1:]
        return pointer_group[separator_pos + len(POINTER_NAME_SEPARATOR):]

    def _cleanName(self, name):
        name = name.replace("::", "")
        if name and name[0] == " ":
            name = name[1:]
        return name
