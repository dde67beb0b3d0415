import argparse
import logging
import os
import subprocess
import sys

from clear2mangled.C2mConfig import C2mConfig
from clear2mangled.ExportIndexBuilder import ExportIndexBuilder
from clear2mangled.ExportLookup import ExportLookup
from clear2mangled.common.C2mExceptions import C2mError, ModeError
from clear2mangled.utility.helpers import parse_hex, read_lines, run_line_script

DECLARATION = "declaration"
FILE_DECLARATION = "file_declaration"
VIRTUAL_ADDRESS = "virtual_address"
FILE_VIRTUAL_ADDRESS = "file_virtual_address"
RVA = "rva"
FILE_RVA = "file_rva"

EXAMPLES = """Examples:
python c2m.py ./msvcp140.dll _Chmod
python c2m.py ./msvcp140.dll 'std::basic_streambuf<char,std::char_traits<char> >::_Pninc'
python c2m.py ./msvcp140.dll --base 40000000 400168B0
python c2m.py ./msvcp140.dll --rva 168B0
python c2m.py ./msvcp140.dll --file declarations.txt --script transform.py"""


def getMode(args):
    if args.script and not args.file:
        raise ModeError("--file & --script must be used together.")
    if args.base is not None and args.rva is not None:
        raise ModeError("--base & --rva can't be used together.")
    if args.file and args.declaration_va:
        raise ModeError("--file & declaration/va can't be used together.")
    if args.rva is not None and args.declaration_va:
        raise ModeError("--rva & declaration/va can't be used together.")
    if args.base is not None:
        if args.declaration_va:
            return VIRTUAL_ADDRESS
        if args.file:
            return FILE_VIRTUAL_ADDRESS
        raise ModeError("declaration/va: 1 argument(s) expected. 0 provided.")
    if args.rva is not None:
        if args.file:
            return FILE_RVA
        if not args.rva:
            raise ModeError("--rva: 1 argument(s) expected. 0 provided.")
        return RVA
    if args.declaration_va:
        return DECLARATION
    if args.file:
        return FILE_DECLARATION
    raise ModeError("unknown c2m mode.")


def printExport(export, base_addr=None, distance=None, mask=C2mConfig.ADDRESS_MASK):
    address = export.rva if base_addr is None else export.getVirtualAddress(base_addr, mask)
    prefix = "" if distance is None else "{}\t".format(distance)
    print("{}{}\t0x{:016x}\t{}\t{}".format(prefix, export.ordinal, address, export.declaration_details.kind, export.mangled_declaration))
    print("+-----------------------------------------------{}\n".format(export.clear_declaration))


def printResult(result, mask=C2mConfig.ADDRESS_MASK):
    if result.details is not None:
        print(result.details)
        print("")
    if result.isEmpty():
        print(result)
        return
    address_column = "Rva" if result.base_addr is None else "Va"
    header = "Ordinal\t{:<18}\tType    \tName".format(address_column)
    if result.distances is not None:
        header = "Match\t" + header
    print(header)
    for index, export in enumerate(result):
        distance = result.distances[index] if result.distances is not None else None
        printExport(export, base_addr=result.base_addr, distance=distance, mask=mask)


def queryDeclaration(lookup, declaration, fuzzy=False):
    if fuzzy:
        return lookup.findByFuzzyDeclaration(declaration)
    return lookup.findByDeclaration(declaration)


def readQueries(args, config):
    for line in read_lines(args.file):
        if not line.strip():
            continue
        if args.script:
            line = run_line_script(config.SCRIPT_INTERPRETER, args.script, line)
        yield line.strip()


def run(args, config):
    mode = getMode(args)
    if args.script and not os.path.isfile(args.script):
        raise ModeError("script file does not exist")
    builder = ExportIndexBuilder(config)
    export_index = builder.loadIndex(args.src, use_cache=not args.nocache)
    logging.info("Loaded %s", export_index)
    lookup = ExportLookup(export_index, config)
    if mode == DECLARATION:
        printResult(queryDeclaration(lookup, args.declaration_va, fuzzy=args.fuzzy), mask=config.ADDRESS_MASK)
    elif mode == VIRTUAL_ADDRESS:
        printResult(lookup.findByAddress(parse_hex(args.base), parse_hex(args.declaration_va)), mask=config.ADDRESS_MASK)
    elif mode == RVA:
        printResult(lookup.findByRva(parse_hex(args.rva)), mask=config.ADDRESS_MASK)
    elif mode == FILE_DECLARATION:
        for query in readQueries(args, config):
            printResult(queryDeclaration(lookup, query, fuzzy=args.fuzzy), mask=config.ADDRESS_MASK)
    elif mode == FILE_VIRTUAL_ADDRESS:
        base_addr = parse_hex(args.base)
        for query in readQueries(args, config):
            printResult(lookup.findByAddress(base_addr, parse_hex(query)), mask=config.ADDRESS_MASK)
    elif mode == FILE_RVA:
        for query in readQueries(args, config):
            printResult(lookup.findByRva(parse_hex(query)), mask=config.ADDRESS_MASK)


def main():
    parser = argparse.ArgumentParser(description='Find the mangled export of a PE file by clear C++ declaration, virtual address or rva.', epilog=EXAMPLES, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('src', type=str, help='The source PE file.')
    parser.add_argument('declaration_va', metavar='declaration/va', type=str, nargs='?', default='', help='The clear declaration of a C++ function/variable or the virtual address of the function/variable (used with --base).')
    parser.add_argument('--file', type=str, default='', help='Use a file to process multi-lined data.')
    parser.add_argument('--script', type=str, default='', help='Python script to process the input data (used with --file).')
    parser.add_argument('--base', type=str, default=None, help='The base address of the module (hex).')
    parser.add_argument('--rva', type=str, nargs='?', const='', default=None, help='The rva of the function/variable (hex), without value when used with --file.')
    parser.add_argument('--nocache', action='store_true', default=False, help='Do not use or generate the cached export table.')
    parser.add_argument('--fuzzy', action='store_true', default=False, help='Use edit distance matching for declarations.')
    parser.add_argument('--cache_path', type=str, default='', help='Directory for export cache files (default: ./cache).')
    parser.add_argument('--demangler', type=str, default='', help='Demangling backend: undname (default) or pdbparse.')
    parser.add_argument('--version', action='version', version='%(prog)s ' + C2mConfig.VERSION)
    parser.add_argument('-v', '--verbose', action='store_true', default=False, help='Enable debug logging.')

    args = parser.parse_args()

    config = C2mConfig()
    if args.verbose:
        config.LOG_LEVEL = logging.DEBUG
    if args.cache_path:
        config.CACHE_PATH = args.cache_path
    if args.demangler:
        config.DEMANGLER = args.demangler
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    try:
        run(args, config)
    except (C2mError, ValueError, OSError, subprocess.CalledProcessError) as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
