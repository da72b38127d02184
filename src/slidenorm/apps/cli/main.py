from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

import orjson

from slidenorm.core.errors import NormalizeError
from slidenorm.core.normalize.presentation import dump_json, load_json, normalize_presentation_json
from slidenorm.core.validate.canonical_contract import run_contract_check
from slidenorm.core.validate.schema_validate import PRESENTATION_SCHEMA, validate_tree

MAX_PRINTED_ERRORS = 30


def _package_root() -> Path:
    # .../src/slidenorm/apps/cli/main.py -> .../src/slidenorm
    return Path(__file__).resolve().parents[2]


def _schema_paths() -> dict[str, Path]:
    return {"presentation": PRESENTATION_SCHEMA}


def _print_errors(errors: list[str]) -> None:
    for m in errors[:MAX_PRINTED_ERRORS]:
        print(f"  {m}" if m.startswith("- ") else f"  - {m}")
    if len(errors) > MAX_PRINTED_ERRORS:
        print(f"  ... ({len(errors)} errors)")


def _read_input(path: Path) -> tuple[Any, int]:
    if not path.exists():
        print(f"[NG] input not found: {path}")
        return None, 2
    try:
        return load_json(path), 0
    except orjson.JSONDecodeError as e:
        print(f"[NG] {path} is not valid JSON")
        print(f"      detail: {e}")
        return None, 2


def cmd_paths(_: argparse.Namespace) -> int:
    print(f"package_root: {_package_root()}")
    for k, v in _schema_paths().items():
        print(f"schema.{k}: {v}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    in_path = Path(args.input).resolve()
    tree, rc = _read_input(in_path)
    if rc:
        return rc

    errs = validate_tree(tree)
    if errs:
        print(f"[NG] {in_path.as_posix()} does NOT conform to the presentation schema")
        _print_errors(errs)
        return 2
    print(f"[OK] {in_path.as_posix()}")
    return 0


def cmd_normalize(args: argparse.Namespace) -> int:
    in_path = Path(args.input).resolve()
    out_path = Path(args.out).resolve()

    tree, rc = _read_input(in_path)
    if rc:
        return rc

    if not args.no_validate:
        errs = validate_tree(tree)
        if errs:
            print("[NG] input tree does not conform to schema; normalize aborted")
            _print_errors(errs)
            return 2

    try:
        canonical = normalize_presentation_json(tree)
    except NormalizeError as e:
        print("[NG] normalize failed")
        print(f"      {type(e).__name__}: {e}")
        return 2

    if args.check:
        errs = run_contract_check(canonical)
        if errs:
            print("[NG] canonical output violates the output contract")
            _print_errors(errs)
            return 2

    dump_json(out_path, canonical)
    print(f"[OK] normalized: {out_path}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    in_path = Path(args.input).resolve()
    canonical, rc = _read_input(in_path)
    if rc:
        return rc

    errs = run_contract_check(canonical)
    if errs:
        print(f"[NG] {in_path.as_posix()}")
        _print_errors(errs)
        return 2
    print(f"[OK] {in_path.as_posix()}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slidenorm")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more (-v info, -vv debug)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_paths = sub.add_parser("paths", help="show important package paths")
    p_paths.set_defaults(func=cmd_paths)

    p_val = sub.add_parser("validate", help="validate a presentation tree json against the schema")
    p_val.add_argument("input", help="path to presentation tree json")
    p_val.set_defaults(func=cmd_validate)

    p_norm = sub.add_parser("normalize", help="normalize a presentation tree into canonical json")
    p_norm.add_argument("input", help="path to presentation tree json")
    p_norm.add_argument("--out", required=True, help="output canonical json path")
    p_norm.add_argument("--check", action="store_true", help="run the output contract check before writing")
    p_norm.add_argument("--no-validate", action="store_true", help="skip input schema validation")
    p_norm.set_defaults(func=cmd_normalize)

    p_chk = sub.add_parser("check", help="check a canonical json against the output contract")
    p_chk.add_argument("input", help="path to canonical json")
    p_chk.set_defaults(func=cmd_check)
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return args.func(args)


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
