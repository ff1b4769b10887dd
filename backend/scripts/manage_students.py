"""CLI script to inspect and edit student records in the backend DB.

Usage:
    python scripts/manage_students.py list
    python scripts/manage_students.py add --name "Alice" [--email a@b.io] [--course CS101] [--id 7]
    python scripts/manage_students.py get ID
    python scripts/manage_students.py update ID --name "Alice B" [--email ...] [--course ...]
    python scripts/manage_students.py delete ID
    python scripts/manage_students.py unique ID
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

# Ensure `backend/` is on sys.path so `mvcapp` imports work when running this script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import ValidationError  # noqa: E402
from sqlmodel import Session  # noqa: E402

from mvcapp import database  # noqa: E402
from mvcapp.config import settings  # noqa: E402
from mvcapp.exceptions import StudentError  # noqa: E402
from mvcapp.logging_config import configure_logging, get_logger  # noqa: E402
from mvcapp.schemas import StudentIn  # noqa: E402
from mvcapp.services import StudentService, build_student_service  # noqa: E402

logger = get_logger("cli")


def _format(student) -> str:
    return "\t".join(str(v) if v is not None else "" for v in (student.id, student.name, student.email, student.course))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage student records")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all students")

    p = sub.add_parser("get", help="Show one student")
    p.add_argument("id", type=int)

    p = sub.add_parser("add", help="Create a student and print its id")
    p.add_argument("--id", type=int, default=None)
    p.add_argument("--name", required=True)
    p.add_argument("--email")
    p.add_argument("--course")

    p = sub.add_parser("update", help="Overwrite an existing student")
    p.add_argument("id", type=int)
    p.add_argument("--name", required=True)
    p.add_argument("--email")
    p.add_argument("--course")

    p = sub.add_parser("delete", help="Delete a student")
    p.add_argument("id", type=int)

    p = sub.add_parser("unique", help="Print whether an id is free")
    p.add_argument("id", type=int)
    return parser


def run(svc: StudentService, args: argparse.Namespace) -> None:
    """Execute one parsed command against `svc`, printing results to stdout."""
    if args.command == "list":
        for s in svc.list_all_students():
            print(_format(s))
    elif args.command == "get":
        print(_format(svc.get_student(args.id)))
    elif args.command == "add":
        payload = StudentIn(id=args.id, name=args.name, email=args.email, course=args.course)
        print(svc.save_student(payload))
    elif args.command == "update":
        payload = StudentIn(name=args.name, email=args.email, course=args.course)
        svc.update(args.id, payload)
        print(f"updated {args.id}")
    elif args.command == "delete":
        svc.delete(args.id)
        print(f"deleted {args.id}")
    elif args.command == "unique":
        print("true" if svc.is_student_unique(args.id) else "false")


def main(argv: Optional[Sequence[str]] = None, svc: Optional[StudentService] = None) -> int:
    """Parse `argv` and run the command. Returns the process exit status.

    Tests pass their own `svc`; otherwise one is built over the configured
    store, creating the tables first when the SQL store is used.
    """
    configure_logging()
    args = _build_parser().parse_args(argv)
    try:
        if svc is not None:
            run(svc, args)
            return 0
        if settings.STUDENT_STORE == "memory":
            run(build_student_service(), args)
            return 0
        database.create_db_and_tables()
        with Session(database.engine) as session:
            run(build_student_service(session), args)
    except (StudentError, ValidationError) as e:
        logger.warning("command %s failed: %s", args.command, e)
        print(f"error: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
