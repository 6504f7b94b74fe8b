"""
This is Retronym, a thoroughly modern assembler for retro consoles and computer systems.

{0}

For example:

    retronym program.rym

will assemble program.rym if possible, or else try to explain why not.

    retronym

with no program starts an interactive prompt.

    retronym -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="retronym",
	description="A thoroughly modern assembler for retro consoles and computer systems.",
)
parser.add_argument("program", nargs="?", help="the source file to assemble; leave it off for an interactive prompt.")
parser.add_argument('-c', "--check", action="store_true", help="Check the program but do not print what it assembles to.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .front_end import assemble_file
	if args.program is None:
		from .repl import repl
		repl(args.verbose)
		return
	report = Report(verbose=args.verbose)
	try:
		obj = assemble_file(Path.cwd() / args.program, report)
	except TooManyIssues:
		obj = None
	if obj is None:
		assert report.sick()
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
		return
	for atom in obj.atoms:
		print("atom", atom)
	for table in obj.tables:
		print(table)

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
		exit(run(parser.parse_args([])))
