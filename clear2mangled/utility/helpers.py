import os
import re
import subprocess

from clear2mangled.common.C2mExceptions import TargetFileError


def read_lines(path):
    if not os.path.isfile(path):
        raise TargetFileError("failed to open file \"{}\"".format(path))
    with open(path, "r") as fin:
        return [line.rstrip("\r\n") for line in fin]


def parse_hex(value):
    """ addresses on the command line are always hex, with or without 0x prefix """
    value = value.strip()
    if value.lower().startswith("0x"):
        value = value[2:]
    return int(value, 16)


def run_line_script(interpreter, script_path, line):
    """ pass one input line through a user script and use its stdout as the new input """
    process = subprocess.run([interpreter, script_path, line], stdout=subprocess.PIPE, check=True)
    return process.stdout.decode("utf-8", errors="replace").strip()


def levenshtein_distance(first, second):
    previous_row = list(range(len(second) + 1))
    for index_first, char_first in enumerate(first, 1):
        current_row = [index_first]
        for index_second, char_second in enumerate(second, 1):
            if char_first == char_second:
                current_row.append(previous_row[index_second - 1])
            else:
                current_row.append(1 + min(previous_row[index_second], current_row[index_second - 1], previous_row[index_second - 1]))
        previous_row = current_row
    return previous_row[-1]


SCOPED_TEMPLATE_FRAGMENT = re.compile(r"::[~\w]+<\w+")


def get_scoped_template_fragments(declaration):
    """ "::name<arg" fragments, used to prefilter candidates for fuzzy matching """
    return SCOPED_TEMPLATE_FRAGMENT.findall(declaration)
