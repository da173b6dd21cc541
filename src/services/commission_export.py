# -*- coding: utf-8 -*-
"""
Provisions-Export: Recibo (PDF) und Relatorio (Excel).

Beide Generatoren nutzen dieselben Design-Tokens.
reportlab/openpyxl werden erst beim Export importiert.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from domain.commission.entities import Commission, CommissionReport
from i18n import pt_br as texts
from utils.date_utils import format_date_br, format_datetime_br
from utils.money_utils import format_brl, format_cpf, round_money

logger = logging.getLogger(__name__)

COLOR_PRIMARY = '#7c3aed'
COLOR_ACCENT = '#f59e0b'
COLOR_LIGHT = '#f3f0ff'
COLOR_MUTED = '#888888'

FONT_REGULAR = 'Helvetica'
FONT_BOLD = 'Helvetica-Bold'


@dataclass
class ReceiptData:
    """Alle Daten fuer einen Recibo de Comissão."""
    salon_name: str
    commission: Commission
    issued_at: datetime = field(default_factory=datetime.now)


def safe_filename(name: str) -> str:
    """Entfernt unerlaubte Zeichen aus Dateinamen."""
    for ch in r'<>:"/\|?*':
        name = name.replace(ch, '_')
    return name.strip()


def get_receipt_filename(commission: Commission, ext: str) -> str:
    when = commission.appointment_start or commission.calculated_at
    datum = when.strftime('%Y_%m_%d') if when else 'sem_data'
    name = safe_filename((commission.professional_name or commission.short_id).replace(' ', '_'))
    base = texts.RECEIPT_FILENAME.format(datum=datum, name=name)
    return f"{base}.{ext}"


def get_report_filename(ext: str, today: Optional[datetime] = None) -> str:
    datum = (today or datetime.now()).strftime('%Y_%m_%d')
    return f"{texts.REPORT_FILENAME.format(datum=datum)}.{ext}"


def receipt_lines(commission: Commission) -> List[Tuple[str, str]]:
    """Betragszeilen des Recibo; Gebuehrenzeilen nur wenn > 0."""
    lines = [
        (texts.RECEIPT_SERVICE_VALUE, format_brl(commission.appointment_total)),
        (texts.COMMISSION_GROSS, format_brl(commission.gross_or_net)),
    ]
    if commission.card_fee_amount > 0:
        lines.append((texts.RECEIPT_CARD_FEE, f"- {format_brl(commission.card_fee_amount)}"))
    if commission.admin_fee_amount > 0:
        lines.append((texts.RECEIPT_ADMIN_FEE, f"- {format_brl(commission.admin_fee_amount)}"))
    return lines


def _info_lines(commission: Commission) -> List[Tuple[str, str]]:
    start = commission.appointment_start
    info = [(texts.RECEIPT_PROFESSIONAL, commission.professional_name or texts.NOT_INFORMED)]
    if commission.professional_cpf:
        info.append((texts.RECEIPT_CPF, format_cpf(commission.professional_cpf)))
    info.extend([
        (texts.RECEIPT_DATE, format_date_br(start) if start else texts.EMPTY_VALUE),
        (texts.RECEIPT_TIME, start.strftime('%H:%M') if start else texts.EMPTY_VALUE),
        (texts.RECEIPT_CLIENT, commission.client_name or texts.NOT_INFORMED),
        (texts.RECEIPT_PAYMENT_METHOD, commission.payment_method_label),
    ])
    return info


# ═══════════════════════════════════════════════════════
#  PDF Generator (reportlab)
# ═══════════════════════════════════════════════════════

def generate_receipt_pdf(data: ReceiptData, path: str) -> None:
    from reportlab.lib import colors
    from reportlab.lib.pagesizes import A5
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.lib.units import mm
    from reportlab.platypus import (
        SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer, HRFlowable,
    )

    doc = SimpleDocTemplate(
        path, pagesize=A5,
        leftMargin=15 * mm, rightMargin=15 * mm,
        topMargin=15 * mm, bottomMargin=15 * mm,
    )

    styles = getSampleStyleSheet()
    s_title = ParagraphStyle(
        'RcptTitle', parent=styles['Title'],
        fontName=FONT_BOLD, fontSize=16,
        textColor=colors.HexColor(COLOR_PRIMARY),
        spaceAfter=1 * mm,
    )
    s_center = ParagraphStyle(
        'RcptCenter', parent=styles['Normal'],
        fontName=FONT_REGULAR, fontSize=10, alignment=1,
    )
    s_section = ParagraphStyle(
        'RcptSection', parent=styles['Heading3'],
        fontName=FONT_BOLD, fontSize=11,
        textColor=colors.HexColor(COLOR_PRIMARY),
        spaceBefore=4 * mm, spaceAfter=2 * mm,
    )
    s_body = ParagraphStyle(
        'RcptBody', parent=styles['Normal'],
        fontName=FONT_REGULAR, fontSize=9,
        textColor=colors.HexColor('#333333'),
    )
    s_val = ParagraphStyle('RcptVal', parent=s_body, alignment=2)
    s_total = ParagraphStyle(
        'RcptTotal', parent=s_body, fontName=FONT_BOLD, fontSize=12, alignment=2,
        textColor=colors.HexColor(COLOR_PRIMARY),
    )
    s_footer = ParagraphStyle(
        'RcptFooter', parent=styles['Normal'],
        fontName=FONT_REGULAR, fontSize=7,
        textColor=colors.HexColor(COLOR_MUTED), alignment=1,
    )

    c = data.commission
    story = [
        Paragraph(data.salon_name, s_title),
        Paragraph(texts.RECEIPT_TITLE, s_center),
        Paragraph(texts.RECEIPT_ISSUED_AT.format(
            datum=format_datetime_br(data.issued_at)), s_center),
        Spacer(1, 3 * mm),
        HRFlowable(width='100%', thickness=1.5, color=colors.HexColor(COLOR_ACCENT)),
    ]

    story.append(Paragraph(texts.RECEIPT_APPOINTMENT, s_section))
    for label, value in _info_lines(c):
        story.append(Paragraph(f"<b>{label}:</b> {value}", s_body))
        story.append(Spacer(1, 1 * mm))

    story.append(Paragraph(texts.RECEIPT_DETAILS, s_section))
    sum_data = [[Paragraph(label, s_body), Paragraph(value, s_val)]
                for label, value in receipt_lines(c)]
    sum_table = Table(sum_data, colWidths=[75 * mm, 43 * mm])
    sum_table.setStyle(TableStyle([
        ('TOPPADDING', (0, 0), (-1, -1), 2),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 2),
        ('LINEBELOW', (0, -1), (-1, -1), 1, colors.HexColor(COLOR_PRIMARY)),
    ]))
    story.append(sum_table)
    story.append(Spacer(1, 2 * mm))

    total_table = Table([[
        Paragraph(f"<b>{texts.COMMISSION_NET}</b>", s_body),
        Paragraph(format_brl(c.amount), s_total),
    ]], colWidths=[75 * mm, 43 * mm])
    total_table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, -1), colors.HexColor(COLOR_LIGHT)),
        ('TOPPADDING', (0, 0), (-1, -1), 4),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
        ('BOX', (0, 0), (-1, -1), 1, colors.HexColor(COLOR_ACCENT)),
    ]))
    story.append(total_table)

    story.append(Spacer(1, 4 * mm))
    story.append(Paragraph(f"<b>{texts.RECEIPT_STATUS}:</b> {c.status_label}", s_body))
    if c.is_paid and c.paid_at:
        story.append(Paragraph(
            texts.RECEIPT_PAID_AT.format(datum=format_datetime_br(c.paid_at)), s_body))

    story.append(Spacer(1, 8 * mm))
    story.append(HRFlowable(width='100%', thickness=0.5, color=colors.HexColor('#cccccc')))
    story.append(Spacer(1, 2 * mm))
    story.append(Paragraph(texts.RECEIPT_FOOTER, s_footer))
    story.append(Paragraph(texts.RECEIPT_ID.format(short_id=c.short_id), s_footer))

    doc.build(story)
    logger.info(f"PDF-Recibo erstellt: {path}")


# ═══════════════════════════════════════════════════════
#  Excel Generator (openpyxl)
# ═══════════════════════════════════════════════════════

def generate_report_xlsx(report: CommissionReport, path: str) -> None:
    import openpyxl
    from openpyxl.styles import Font, PatternFill, Alignment
    from openpyxl.utils import get_column_letter

    wb = openpyxl.Workbook()

    hdr_font = Font(name='Calibri', bold=True, color='FFFFFF', size=10)
    hdr_fill = PatternFill(start_color='7c3aed', end_color='7c3aed', fill_type='solid')
    zebra_fill = PatternFill(start_color='f3f0ff', end_color='f3f0ff', fill_type='solid')
    title_font = Font(name='Calibri', bold=True, size=16, color='7c3aed')
    section_font = Font(name='Calibri', bold=True, size=12, color='7c3aed')
    label_font = Font(name='Calibri', size=10, color='333333')
    total_font = Font(name='Calibri', bold=True, size=11, color='7c3aed')
    brl_fmt = '"R$" #,##0.00'

    def header_row(ws, row: int, headers: List[str]) -> None:
        for ci, h in enumerate(headers, 1):
            cell = ws.cell(row=row, column=ci, value=h)
            cell.font = hdr_font
            cell.fill = hdr_fill
            cell.alignment = Alignment(horizontal='center')

    def money_cell(ws, row: int, col: int, value, font=label_font):
        cell = ws.cell(row=row, column=col, value=float(round_money(value)))
        cell.font = font
        cell.number_format = brl_fmt
        cell.alignment = Alignment(horizontal='right')
        return cell

    # Sheet 1: Resumo
    ws = wb.active
    ws.title = texts.REPORT_SHEET_SUMMARY

    ws.merge_cells('A1:D1')
    ws.cell(row=1, column=1, value=texts.REPORT_TITLE).font = title_font
    ws.cell(row=2, column=1, value=format_datetime_br(datetime.now())).font = label_font

    row = 4
    for label, value in ((texts.REPORT_TOTAL_PENDING, report.total_pending),
                         (texts.REPORT_TOTAL_PAID, report.total_paid)):
        ws.cell(row=row, column=1, value=label).font = total_font
        money_cell(ws, row, 2, value, total_font)
        row += 1

    row += 1
    ws.cell(row=row, column=1, value=texts.REPORT_PER_PROFESSIONAL).font = section_font
    row += 1
    header_row(ws, row, [texts.REPORT_COL_PROFESSIONAL, texts.REPORT_COL_PENDING,
                         texts.REPORT_COL_PAID, texts.REPORT_COL_TOTAL])
    row += 1
    for ri, summary in enumerate(report.per_professional):
        ws.cell(row=row, column=1, value=summary.display_name).font = label_font
        money_cell(ws, row, 2, summary.pending)
        money_cell(ws, row, 3, summary.paid)
        money_cell(ws, row, 4, summary.total)
        if ri % 2 == 1:
            for ci in range(1, 5):
                ws.cell(row=row, column=ci).fill = zebra_fill
        row += 1

    for ci, w in enumerate([28, 16, 16, 16], 1):
        ws.column_dimensions[get_column_letter(ci)].width = w

    # Sheet 2: Comissões
    ws = wb.create_sheet(texts.REPORT_SHEET_POSITIONS)
    headers = [
        texts.REPORT_COL_DATE, texts.REPORT_COL_PROFESSIONAL, texts.REPORT_COL_CLIENT,
        texts.REPORT_COL_PAYMENT, texts.REPORT_COL_GROSS, texts.REPORT_COL_FEES,
        texts.REPORT_COL_NET, texts.REPORT_COL_STATUS,
    ]
    header_row(ws, 1, headers)
    row = 2
    for ri, c in enumerate(report.filtered):
        when = c.appointment_start or c.calculated_at
        ws.cell(row=row, column=1, value=format_date_br(when) if when else '').font = label_font
        ws.cell(row=row, column=2, value=c.professional_name or '').font = label_font
        ws.cell(row=row, column=3, value=c.client_name or '').font = label_font
        ws.cell(row=row, column=4, value=c.payment_method_label).font = label_font
        money_cell(ws, row, 5, c.gross_or_net)
        money_cell(ws, row, 6, c.card_fee_amount + c.admin_fee_amount)
        money_cell(ws, row, 7, c.amount)
        ws.cell(row=row, column=8, value=c.status_label).font = label_font
        if ri % 2 == 1:
            for ci in range(1, len(headers) + 1):
                ws.cell(row=row, column=ci).fill = zebra_fill
        row += 1

    for ci, w in enumerate([12, 24, 24, 18, 14, 14, 14, 12], 1):
        ws.column_dimensions[get_column_letter(ci)].width = w

    wb.save(path)
    logger.info(f"Excel-Relatorio erstellt: {path}")


def export_receipt(data: ReceiptData, folder: str) -> str:
    """Recibo in den Ordner schreiben. Gibt den Dateipfad zurueck."""
    path = os.path.join(folder, get_receipt_filename(data.commission, 'pdf'))
    generate_receipt_pdf(data, path)
    return path


def export_report(report: CommissionReport, folder: str) -> str:
    path = os.path.join(folder, get_report_filename('xlsx'))
    generate_report_xlsx(report, path)
    return path
