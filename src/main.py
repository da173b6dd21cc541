#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Salão Agenda - Haupteinstiegspunkt

Kommandozeile fuer Provisionen (Berechnung, Abschluss, Bericht, Recibo)
und die Tagesansicht der Agenda.
"""

import argparse
import logging
import os
import sys
from datetime import date
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Pfad zum src-Verzeichnis
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from api.client import APIClient, APIConfig
from config.agenda import WEEK_STARTS_ON
from config.backend import get_config_dir, load_backend_config
from domain.agenda.entities import DayAgenda
from domain.commission.entities import (
    CommissionReport, CommissionResult, PaymentSelection, PAYMENT_METHODS, PAYMENT_CASH,
)
from domain.commission.reporting import FILTER_ALL
from i18n import pt_br as texts
from infrastructure.api.salon_repository import SalonRepository
from presenters.agenda.agenda_presenter import AgendaPresenter
from presenters.commission.commission_presenter import CommissionPresenter
from utils.date_utils import format_date_br, parse_date
from utils.money_utils import format_brl

logger = logging.getLogger(__name__)


def _read_app_version() -> str:
    """Liest die App-Version aus der VERSION-Datei (zentrale Versionsquelle)."""
    path = os.path.join(_src_dir, "..", "VERSION")
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            version = f.read().strip()
            if version:
                return version
    except OSError:
        pass
    return "0.0.0"


APP_VERSION = _read_app_version()


def setup_logging(level: int = logging.INFO) -> None:
    """Konfiguriert Logging mit Console + File Output."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File Handler mit Rotation (5 MB, 3 Backups)
    try:
        log_dir = os.path.join(str(get_config_dir()), "logs")
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, "salao_agenda.log")
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.debug(f"File-Logging aktiviert: {log_file}")
    except OSError as e:
        root_logger.warning(f"File-Logging nicht moeglich, nur Console: {e}")


class ConsoleView:
    """Einfache Textausgabe; implementiert ICommissionView und IAgendaView."""

    def __init__(self, out=None):
        self._out = out or sys.stdout

    def _print(self, text: str = '') -> None:
        print(text, file=self._out)

    def show_commission(self, result: CommissionResult, lines: List[tuple]) -> None:
        self._print(f"{result.payment.method_label} {result.payment.installments}x")
        for label, value in lines:
            self._print(f"  {label:<45} {value:>14}")

    def show_report(self, report: CommissionReport, lines: List[tuple]) -> None:
        self._print(texts.REPORT_TITLE)
        self._print(f"  {texts.REPORT_TOTAL_PENDING}: {format_brl(report.total_pending)}")
        self._print(f"  {texts.REPORT_TOTAL_PAID}: {format_brl(report.total_paid)}")
        self._print(texts.REPORT_PER_PROFESSIONAL)
        for name, pending, paid, total in lines:
            self._print(f"  {name:<30} {pending:>14} {paid:>14} {total:>14}")
        for c in report.filtered:
            self._print(
                f"  {c.short_id}  {c.professional_name or '':<24} "
                f"{format_brl(c.amount):>14}  {c.status_label}"
            )

    def show_agenda(self, agenda: DayAgenda, lines: List[tuple]) -> None:
        self._print(format_date_br(agenda.day))
        if agenda.is_empty:
            self._print(f"  {texts.AGENDA_NO_ENTRIES}")
        for time_label, title, detail in lines:
            self._print(f"  {time_label}  {title}  ({detail})")

    def show_slots(self, professional_id: str, day: date, slots: List[str]) -> None:
        self._print(f"{texts.AGENDA_FREE_SLOTS} {format_date_br(day)}: {', '.join(slots)}")

    def show_month(self, title: str, weeks: List[List[date]], anchor: date) -> None:
        """Monatsraster; Tage anderer Monate in Klammern, der gewaehlte Tag mit *."""
        self._print(title)
        order = [(WEEK_STARTS_ON + i) % 7 for i in range(7)]
        self._print(''.join(f"{texts.WEEKDAY_SHORT[d]:>5}" for d in order))
        for week in weeks:
            cells = []
            for day in week:
                cell = str(day.day) if day.month == anchor.month else f"({day.day})"
                if day == anchor:
                    cell += '*'
                cells.append(f"{cell:>5}")
            self._print(''.join(cells))

    def show_error(self, message: str) -> None:
        print(message, file=sys.stderr)

    def show_success(self, message: str) -> None:
        self._print(message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='salao-agenda', description=texts.APP_NAME)
    parser.add_argument('--version', action='version', version=f"%(prog)s {APP_VERSION}")
    parser.add_argument('--debug', action='store_true')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('commission')
    p.add_argument('appointment_id')
    p.add_argument('--method', choices=PAYMENT_METHODS, default=PAYMENT_CASH)
    p.add_argument('--installments', type=int, default=1)
    p.add_argument('--complete', action='store_true')

    sub.add_parser('installments')

    p = sub.add_parser('report')
    p.add_argument('--status', choices=('pending', 'paid'))
    p.add_argument('--professional', default=FILTER_ALL)
    p.add_argument('--xlsx', metavar='DIR')

    p = sub.add_parser('pay')
    p.add_argument('commission_id')

    p = sub.add_parser('receipt')
    p.add_argument('commission_id')
    p.add_argument('--out', default='.')

    p = sub.add_parser('agenda')
    p.add_argument('--date', type=parse_date, default=None)
    p.add_argument('--professional', default=FILTER_ALL)

    p = sub.add_parser('month')
    p.add_argument('--date', type=parse_date, default=None)

    p = sub.add_parser('slots')
    p.add_argument('professional_id')
    p.add_argument('--date', type=parse_date, default=None)
    return parser


def run(args: argparse.Namespace, repository: SalonRepository, view: ConsoleView) -> int:
    commissions = CommissionPresenter(repository)
    commissions.set_view(view)
    agenda = AgendaPresenter(repository)
    agenda.set_view(view)

    if args.command == 'commission':
        payment = PaymentSelection(args.method, args.installments)
        if args.complete:
            return 0 if commissions.complete_appointment(args.appointment_id, payment) else 1
        return 0 if commissions.show_commission(args.appointment_id, payment) else 1
    if args.command == 'installments':
        for label in commissions.installment_labels():
            view.show_success(label)
        return 0
    if args.command == 'report':
        if args.xlsx:
            path = commissions.export_report(args.xlsx, args.status, args.professional)
            return 0 if path else 1
        commissions.load_report(args.status, args.professional)
        return 0
    if args.command == 'pay':
        return 0 if commissions.pay_commission(args.commission_id) else 1
    if args.command == 'receipt':
        return 0 if commissions.export_receipt(args.commission_id, args.out) else 1
    if args.command == 'agenda':
        agenda.load_day(args.date or date.today(), args.professional)
        return 0
    if args.command == 'month':
        agenda.load_month(args.date or date.today())
        return 0
    if args.command == 'slots':
        agenda.load_slots(args.professional_id, args.date or date.today())
        return 0
    return 2


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    logger.info(f"{texts.APP_NAME} {APP_VERSION}")

    backend = load_backend_config()
    view = ConsoleView()
    if not backend.is_complete:
        view.show_error(texts.MSG_CONFIG_INCOMPLETE)
        return 2

    client = APIClient(APIConfig.from_backend(backend))
    repository = SalonRepository(client, backend.salon_id, backend.timezone)
    return run(args, repository, view)


if __name__ == '__main__':
    sys.exit(main())
