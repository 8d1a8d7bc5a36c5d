"""
Command-line interface for managing a persisted campus portal.

The portal state lives in the SQL storage configured by the environment
(STORAGE_URL, or the SQLite file at STORAGE_PATH / data/portal.db).

For usage information, run:
    python scripts/portal.py --help

Common use cases:
    # List events, optionally filtered by a search term
    python scripts/portal.py events list --search hackathon

    # Publish an event
    python scripts/portal.py events add "Tech Fest" --date 2025-03-04 --time "10:00 AM" \\
        --location "Main Hall" --category Fest --organizer "CSE Dept" --capacity 200

    # Register a student for an event
    python scripts/portal.py events register <event_id> SIST2022CS001

    # Review on-duty requests
    python scripts/portal.py od list --status pending
    python scripts/portal.py od approve OD-001

    # Issue certificates from a CSV upload
    python scripts/portal.py certificates import recipients.csv --issued-by "Prof. Sarah Johnson"
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import StoreError
from .models import NewEvent, NewODRequest, Student
from .portal import Portal, create_persistent_portal
from .utils.csv_parser import CSVParseError, generate_sample_csv, parse_csv
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def print_events(portal: Portal, search: str = "", detailed: bool = False) -> None:
    events = portal.events.search_events(search)
    if not events:
        print("No events found")
        return
    for event in events:
        print(f"{event.id}  {event.date.isoformat()} {event.time}  {event.title}  ({event.attendees}/{event.capacity})")
        if detailed:
            print(f"    {event.category} by {event.organizer} at {event.location}")
            if event.description:
                print(f"    {event.description}")
            if event.registered_users:
                print(f"    Registered: {', '.join(event.registered_users)}")


def print_requests(portal: Portal, search: str = "", status: str = "all") -> None:
    requests = portal.od_requests.filter_requests(search, status)
    if not requests:
        print("No on-duty requests found")
        return
    for req in requests:
        when = f"{req.date} {req.time}" if req.time else req.date
        print(f"{req.id}  [{req.status}]  {req.student.name} ({req.student.id})  {req.event} on {when}: {req.reason}")


def print_certificates(portal: Portal, search: str = "", type_filter: str = "all") -> None:
    certificates = portal.certificates.search_certificates(search, type_filter)
    if not certificates:
        print("No certificates found")
        return
    for cert in certificates:
        print(f"{cert.id}  {cert.date}  {cert.title} ({cert.type})  {cert.student} [{cert.register_number}]  by {cert.issued_by}")


def handle_events(portal: Portal, args: argparse.Namespace) -> None:
    if args.action == 'list':
        print_events(portal, args.search, args.detailed)
    elif args.action == 'add':
        event = portal.events.add_event(NewEvent(
            title=args.title,
            date=args.date,
            time=args.time,
            location=args.location,
            category=args.category,
            organizer=args.organizer,
            capacity=args.capacity,
            description=args.description,
            image=args.image,
        ))
        print(f"Added event {event.id}")
    elif args.action == 'delete':
        if not portal.events.delete_event(args.event_id):
            print(f"No event with id {args.event_id}")
    elif args.action == 'register':
        if portal.events.register_for_event(args.event_id, args.participant_id):
            print(f"Registered {args.participant_id}")
        else:
            print(f"Nothing to do: unknown event or {args.participant_id} already registered")


def handle_od(portal: Portal, args: argparse.Namespace) -> None:
    if args.action == 'list':
        print_requests(portal, args.search, args.status)
    elif args.action == 'add':
        request = portal.od_requests.add_request(
            NewODRequest(
                reason=args.reason,
                event=args.event,
                date=args.date,
                description=args.description,
                time=args.time,
            ),
            Student(name=args.student_name, id=args.student_id),
        )
        print(f"Submitted request {request.id}")
    elif args.action in ('approve', 'reject'):
        status = 'Approved' if args.action == 'approve' else 'Rejected'
        if portal.od_requests.update_request_status(args.request_id, status) is None:
            print(f"No request with id {args.request_id}")


def handle_certificates(portal: Portal, args: argparse.Namespace) -> None:
    if args.action == 'list':
        print_certificates(portal, args.search, args.type)
    elif args.action == 'import':
        recipients = parse_csv(Path(args.csv_file).read_text(encoding='utf-8'))
        issued = portal.certificates.issue_bulk(
            recipients,
            issued_by=args.issued_by,
            title=args.title,
            certificate_type=args.type,
            template_url=args.template,
        )
        print(f"Issued {len(issued)} certificates")
    elif args.action == 'sample':
        print(generate_sample_csv())
    elif args.action == 'delete':
        if not portal.certificates.delete_certificate(args.certificate_id):
            print(f"No certificate with id {args.certificate_id}")


def handle_session(portal: Portal, args: argparse.Namespace) -> None:
    if args.action == 'show':
        user = portal.session.get_current_user()
        if user:
            print(f"Logged in as {user.user_type} {user.user_id} -> {portal.session.dashboard_path()}")
        else:
            print("Not logged in")
    elif args.action == 'login':
        portal.session.login(args.user_id, args.user_type)
        print(f"Logged in; dashboard at {portal.session.dashboard_path()}")
    elif args.action == 'logout':
        portal.session.logout()
        print("Logged out")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Manage the campus portal data')
    parser.add_argument('--verbose', action='store_true', help='Show info-level logs')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # Events
    events_parser = subparsers.add_parser('events', help='Manage events')
    events_sub = events_parser.add_subparsers(dest='action', required=True)
    list_parser = events_sub.add_parser('list', help='List events')
    list_parser.add_argument('--search', default='', help='Filter by title or description')
    list_parser.add_argument('--detailed', action='store_true', help='Show full event details')
    add_parser = events_sub.add_parser('add', help='Publish an event')
    add_parser.add_argument('title')
    add_parser.add_argument('--date', required=True, help='Event date (YYYY-MM-DD)')
    add_parser.add_argument('--time', required=True)
    add_parser.add_argument('--location', required=True)
    add_parser.add_argument('--category', required=True)
    add_parser.add_argument('--organizer', required=True)
    add_parser.add_argument('--capacity', type=int, required=True)
    add_parser.add_argument('--description', default='')
    add_parser.add_argument('--image', help='Banner image URL')
    delete_parser = events_sub.add_parser('delete', help='Delete an event')
    delete_parser.add_argument('event_id')
    register_parser = events_sub.add_parser('register', help='Register a participant')
    register_parser.add_argument('event_id')
    register_parser.add_argument('participant_id')

    # On-duty requests
    od_parser = subparsers.add_parser('od', help='Manage on-duty requests')
    od_sub = od_parser.add_subparsers(dest='action', required=True)
    od_list = od_sub.add_parser('list', help='List requests')
    od_list.add_argument('--search', default='', help='Filter by student name or id')
    od_list.add_argument('--status', default='all', choices=['all', 'pending', 'approved', 'rejected'])
    od_add = od_sub.add_parser('add', help='Submit a request')
    od_add.add_argument('student_id')
    od_add.add_argument('student_name')
    od_add.add_argument('--reason', required=True)
    od_add.add_argument('--event', required=True)
    od_add.add_argument('--date', required=True)
    od_add.add_argument('--time')
    od_add.add_argument('--description', default='')
    for action in ('approve', 'reject'):
        review_parser = od_sub.add_parser(action, help=f'{action.capitalize()} a pending request')
        review_parser.add_argument('request_id')

    # Certificates
    cert_parser = subparsers.add_parser('certificates', help='Manage certificates')
    cert_sub = cert_parser.add_subparsers(dest='action', required=True)
    cert_list = cert_sub.add_parser('list', help='List certificates')
    cert_list.add_argument('--search', default='', help='Filter by title, student or register number')
    cert_list.add_argument('--type', default='all')
    cert_import = cert_sub.add_parser('import', help='Issue certificates from a CSV file')
    cert_import.add_argument('csv_file')
    cert_import.add_argument('--issued-by', required=True)
    cert_import.add_argument('--title', default='Certificate of Achievement')
    cert_import.add_argument('--type', default='Achievement')
    cert_import.add_argument('--template', help='Background template URL')
    cert_sub.add_parser('sample', help='Print a sample CSV')
    cert_delete = cert_sub.add_parser('delete', help='Delete a certificate')
    cert_delete.add_argument('certificate_id')

    # Session
    session_parser = subparsers.add_parser('session', help='Inspect or change the session')
    session_sub = session_parser.add_subparsers(dest='action', required=True)
    session_sub.add_parser('show', help='Show the current user')
    login_parser = session_sub.add_parser('login', help='Log in as a user')
    login_parser.add_argument('user_id')
    login_parser.add_argument('user_type', choices=['student', 'faculty'])
    session_sub.add_parser('logout', help='Log out')

    return parser


HANDLERS = {
    'events': handle_events,
    'od': handle_od,
    'certificates': handle_certificates,
    'session': handle_session,
}


def main(argv: Optional[List[str]] = None, portal: Optional[Portal] = None) -> None:
    """
    Run the CLI.

    Args:
        argv: Arguments to parse instead of sys.argv
        portal: Portal to operate on. Defaults to the persisted portal
               configured by the environment.
    """
    args = build_parser().parse_args(argv)
    setup_logging(logging.INFO if args.verbose else logging.WARNING)

    if portal is None:
        portal = create_persistent_portal()
    try:
        HANDLERS[args.command](portal, args)
    except (StoreError, CSVParseError, ValueError, OSError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
