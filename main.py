import argparse

from rich.pretty import pprint

from argscan import *

parser = argparse.ArgumentParser(prog="demo")
parser.add_argument("-o", "--output")
parser.add_argument("-d", "--debug", action="store_true")

args = Args(["--output", "out.txt", "-extra", "x", "-d", "--", "file"]).with_parser(parser)


if __name__ == '__main__':
    pprint(list(args.entries()))
    pprint(args.upsert_flag(FlagEntry("output", "log.txt"), lambda old: old.with_value("log.txt")))
    pprint(args.strip_unknown_flags())
