#!/usr/bin/env python3
"""
Dump a file as a Go byte slice literal.

$ blob2go logo.png > logo.go.inc
"""

import sys


def read_blob(path):
    with open(path, 'rb') as f:
        return f.read()


def render(blob, name="imageData"):
    values = ', '.join(str(int(c)) for c in blob)
    return f"var {name} = []byte{{{values}}}"


def main(argv=None):
    if argv is None:
        argv = sys.argv

    if len(argv) != 2:
        print(f"Usage: {argv[0] if argv else 'blob2go'} <file>", file=sys.stderr)
        return 1

    path = argv[1]
    try:
        blob = read_blob(path)
    except OSError as err:
        print(f"{argv[0]}: cannot read {path}: {err.strerror or err}", file=sys.stderr)
        return 1

    print(render(blob))
    return 0


if __name__ == "__main__":
    sys.exit(main())
