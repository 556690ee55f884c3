# pcomb/pcombc.py
"""pcombc – pcomb CLI

Usage
    $ python -m pcomb.pcombc check grammar.txt -D
    $ python -m pcomb.pcombc ast grammar.txt --rule expr

Commands
--------
- check : read the grammar, report rule references that have no rule
- ast   : print the normalized expression of every rule (or one of them)

-D/--debug writes progress lines to stderr.
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional

# ------------------------------
# helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _load(path: str, debug: bool):
    from .grammar.loader import load_grammar_text
    from .grammar.reader import read_grammar

    src = load_grammar_text(path)
    if debug: _eprint("[DEBUG] read %s | lines=%d" % (path, src.count("\n") + 1))

    g = read_grammar(src)
    if debug: _eprint("[DEBUG] rules=%d start=%s" % (len(g.rules), g.start))
    return g

# ------------------------------
# commands
# ------------------------------

def cmd_check(args) -> int:
    try:
        g = _load(args.file, debug=args.debug)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.debug:
        for r in g.rules.values():
            _eprint(f"[DEBUG] {r.name}: {r.expression!r}")

    missing = g.undefined_refs()
    if missing:
        _eprint("[UNDEFINED] " + ", ".join(missing))
        return 1

    print(f"[CHECK OK] rules={len(g.rules)} start={g.start}")
    return 0


def cmd_ast(args) -> int:
    try:
        g = _load(args.file, debug=args.debug)
        rules = [g.require_rule(args.rule)] if args.rule else list(g.rules.values())
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    for r in rules:
        print(f"{r.name}: {r.expression!r}")
    return 0

# ------------------------------
# entrypoint
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="pcombc", description="pcomb grammar reader CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="read a grammar and report undefined rule references")
    p_check.add_argument("file", help="grammar file")
    p_check.add_argument("-D", "--debug", action="store_true", help="verbose progress on stderr")
    p_check.set_defaults(func=cmd_check)

    p_ast = sub.add_parser("ast", help="print normalized rule expressions")
    p_ast.add_argument("file", help="grammar file")
    p_ast.add_argument("--rule", help="only this rule")
    p_ast.add_argument("-D", "--debug", action="store_true", help="verbose progress on stderr")
    p_ast.set_defaults(func=cmd_ast)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
