#!/usr/local/bin/python3

from os.path import abspath, dirname, join
from sys import path

path.insert(0, join(dirname(abspath(__file__)), "lib", "python"))

from entrygen.generate import main

if __name__ == "__main__":
    main()

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
