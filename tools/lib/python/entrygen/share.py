
from datetime import date
from functools import partial
from os.path import abspath, basename, dirname, join
from re import compile, sub
import sys
from sys import argv

ENTRY_PREFIX = "entry_"
PLACEHOLDER_SYSCALLS = ("enosys", "nosys")

# Spelled as the harness headers spell them.
ARG_SYMBOLS = (
        "FIRST_ARG", "SECOND_ARG", "THIRD_ARG", "FOURTH_ARG", "FIFTH_ARG",
        "SIXTH_ARG", "SEVENTH_ARG", "EIGTH_ARG", "NINTH_ARG", "TENTH_ARG",
        "ELEVENTH_ARG", "TWELFTH_ARG")

INPUT_DIR = "input"
TABLE_OF_PLATFORM = {
        "darwin": "osx-syscall.master",
        "freebsd": "freebsd-syscall.master" }

TEMPLATE_DIR = join(dirname(abspath(__file__)), "templates")

def partial_print(fp):
    p = partial(print, end="", file=fp)
    return p, partial(p, "\n")

def warn(msg):
    print(msg, file=sys.stderr)

def make_entry_name(name):
    return ENTRY_PREFIX + name

def print_caution(p):
    prog = basename(argv[0])
    year = date.today().year
    p("""\
/**
 * THIS FILE WAS GENERATED BY {prog}. DON'T EDIT.
 *
 * Copyright (c) {year}
 */
""".format(**locals()))

def write_c_footer(p):
    p("""\
/**
 * vim: filetype=c
 */
""")

RE_VAR = compile(r"@(?P<name>[A-Za-z_]\w*)@")

def apply_template(d, path, tmpl, tmpl_dir=TEMPLATE_DIR):
    with open(join(tmpl_dir, tmpl), "r") as fpin:
        lines = [sub(RE_VAR, lambda m: d[m.group("name")], line)
                 for line in fpin]

    with open(path, "w") as fpout:
        p, print_newline = partial_print(fpout)
        print_caution(p)
        p("".join(lines))
        print_newline()
        write_c_footer(p)

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
