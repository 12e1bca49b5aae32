
from os import getcwd, mkdir
from os.path import abspath, basename, exists, join
from sys import argv, exit, platform as host

from entrygen.entry import write_entry
from entrygen.proto import split_records
from entrygen.share import INPUT_DIR, TABLE_OF_PLATFORM, TEMPLATE_DIR, warn
from entrygen.syscalls import TooManyArguments, parse_record
from entrygen.table import write_syscall_list, write_syscall_table

class UnknownPlatform(Exception):

    def __init__(self, platform):
        self.platform = platform
        supported = ", ".join(sorted(TABLE_OF_PLATFORM))
        fmt = "unknown platform: {platform} (supported: {supported})"
        super().__init__(fmt.format(**locals()))

def host_platform():
    for platform in TABLE_OF_PLATFORM:
        if host.startswith(platform):
            return platform
    return host

def read_table(dirpath, platform):
    try:
        table = TABLE_OF_PLATFORM[platform]
    except KeyError:
        raise UnknownPlatform(platform)
    with open(join(dirpath, INPUT_DIR, table)) as fp:
        return fp.read()

def write_entries(dirpath, src, tmpl_dir=TEMPLATE_DIR):
    names = []
    for record in split_records(src):
        try:
            syscall = parse_record(record)
        except TooManyArguments as e:
            warn("{e} Skipped.".format(**locals()))
            continue
        if syscall is None:
            continue
        if not syscall.is_placeholder:
            write_entry(dirpath, syscall, tmpl_dir)
        names.append(syscall.name)
    return names

def generate_output(dirpath, platform, src, tmpl_dir=TEMPLATE_DIR):
    outdir = join(dirpath, platform)
    if not exists(outdir):
        mkdir(outdir)

    names = write_entries(outdir, src, tmpl_dir)
    write_syscall_list(outdir, names, tmpl_dir)
    write_syscall_table(outdir, platform, names, tmpl_dir)

    return names

def usage():
    warn("Usage: {prog} [platform [dirpath]]".format(prog=basename(argv[0])))

def main(args=None):
    args = argv[1:] if args is None else args
    if 2 < len(args):
        usage()
        exit(1)

    if len(args) == 0:
        platform = host_platform()
        warn("No operating system selected, defaulting to: {platform}".format(**locals()))
    else:
        platform = args[0]
    dirpath = abspath(getcwd()) if len(args) < 2 else args[1]

    try:
        src = read_table(dirpath, platform)
        generate_output(dirpath, platform, src)
    except UnknownPlatform as e:
        warn(str(e))
        exit(1)
    except OSError as e:
        warn("Can't generate entries for {platform}: {e}".format(**locals()))
        exit(1)
    except KeyError as e:
        warn("Template refers to an unknown field: {e}".format(**locals()))
        exit(1)

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
