# -*- coding: utf-8 -*-
"""
UI-Texte (Portugiesisch/Brasilien).

Alle sichtbaren Texte zentral hier, Code referenziert nur Konstanten.
Verwendung: ``from i18n import pt_br as texts``
"""

APP_NAME = "Salão Agenda"

# ── Waehrung / Datum ──────────────────────────────────────────────────────
CURRENCY_SYMBOL = "R$"
DATETIME_AT = "às"
EMPTY_VALUE = "-"
NOT_INFORMED = "Não informado"

# ── Zahlungsarten ─────────────────────────────────────────────────────────
PAYMENT_METHOD_CASH = "Dinheiro"
PAYMENT_METHOD_PIX = "PIX"
PAYMENT_METHOD_CREDIT_CARD = "Cartão de Crédito"
PAYMENT_METHOD_DEBIT_CARD = "Cartão de Débito"
PAYMENT_METHOD_OTHER = "Outro"

PAYMENT_METHOD_LABELS = {
    'cash': PAYMENT_METHOD_CASH,
    'pix': PAYMENT_METHOD_PIX,
    'credit_card': PAYMENT_METHOD_CREDIT_CARD,
    'debit_card': PAYMENT_METHOD_DEBIT_CARD,
    'other': PAYMENT_METHOD_OTHER,
}

INSTALLMENT_LABEL = "{n}x"
INSTALLMENT_LABEL_WITH_FEE = "{n}x (taxa: {percent}%)"

# ── Provisionsregeln ──────────────────────────────────────────────────────
COMMISSION_RULE_PERCENT = "{percent}%"
COMMISSION_RULE_DEFAULT = "{percent}% (padrão)"
COMMISSION_RULE_FIXED = "{amount} fixo"
COMMISSION_SERVICE_FALLBACK = "Serviço"

COMMISSION_GROSS = "Comissão bruta"
COMMISSION_CARD_FEE = "(-) Taxa cartão {installments}x ({percent}%)"
COMMISSION_ADMIN_FEE = "(-) Taxa admin ({percent}%)"
COMMISSION_NET = "Comissão líquida"

COMMISSION_STATUS_PENDING = "PENDENTE"
COMMISSION_STATUS_PAID = "PAGO"
COMMISSION_STATUS_LABELS = {
    'pending': COMMISSION_STATUS_PENDING,
    'paid': COMMISSION_STATUS_PAID,
}

# ── Recibo (PDF) ──────────────────────────────────────────────────────────
RECEIPT_TITLE = "Recibo de Comissão"
RECEIPT_ISSUED_AT = "Emitido em {datum}"
RECEIPT_PROFESSIONAL = "Profissional"
RECEIPT_CPF = "CPF"
RECEIPT_APPOINTMENT = "Atendimento"
RECEIPT_DATE = "Data"
RECEIPT_TIME = "Horário"
RECEIPT_CLIENT = "Cliente"
RECEIPT_PAYMENT_METHOD = "Forma de pagamento"
RECEIPT_DETAILS = "Detalhamento da Comissão"
RECEIPT_SERVICE_VALUE = "Valor do atendimento"
RECEIPT_CARD_FEE = "(-) Taxa de cartão"
RECEIPT_ADMIN_FEE = "(-) Taxa administrativa"
RECEIPT_STATUS = "Status"
RECEIPT_PAID_AT = "Pago em {datum}"
RECEIPT_FOOTER = "Documento gerado automaticamente pelo sistema"
RECEIPT_ID = "ID: {short_id}"
RECEIPT_FILENAME = "Recibo_Comissao_{datum}_{name}"

# ── Relatorio (Excel) ─────────────────────────────────────────────────────
REPORT_TITLE = "Relatório de Comissões"
REPORT_SHEET_SUMMARY = "Resumo"
REPORT_SHEET_POSITIONS = "Comissões"
REPORT_TOTAL_PENDING = "Pendentes"
REPORT_TOTAL_PAID = "Pagas"
REPORT_PER_PROFESSIONAL = "Resumo por Profissional"
REPORT_COL_PROFESSIONAL = "Profissional"
REPORT_COL_PENDING = "Pendente"
REPORT_COL_PAID = "Pago"
REPORT_COL_TOTAL = "Total"
REPORT_COL_DATE = "Data"
REPORT_COL_CLIENT = "Cliente"
REPORT_COL_PAYMENT = "Pagamento"
REPORT_COL_GROSS = "Bruto"
REPORT_COL_FEES = "Taxas"
REPORT_COL_NET = "Líquido"
REPORT_COL_STATUS = "Status"
REPORT_FILENAME = "Relatorio_Comissoes_{datum}"

# ── Agenda ────────────────────────────────────────────────────────────────
WEEKDAY_SHORT = ['Dom', 'Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sáb']
WEEKDAY_LONG = [
    'Domingo', 'Segunda-feira', 'Terça-feira', 'Quarta-feira',
    'Quinta-feira', 'Sexta-feira', 'Sábado',
]
MONTH_NAMES = [
    'janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho',
    'julho', 'agosto', 'setembro', 'outubro', 'novembro', 'dezembro',
]
MONTH_TITLE = "{month} de {year}"

RECURRENCE_DAILY = "Diário"
RECURRENCE_WEEKLY = "Semanal"
RECURRENCE_WEEKLY_DAYS = "Semanal ({days})"
RECURRENCE_UNTIL = "até {datum}"

AGENDA_ALL_PROFESSIONALS = "Todos os profissionais"
AGENDA_CLIENT_FALLBACK = "Cliente"
AGENDA_NO_ENTRIES = "Nenhum horário ocupado neste dia"
AGENDA_BLOCK_PREFIX = "Bloqueio"
AGENDA_FREE_SLOTS = "Horários livres"

APPOINTMENT_STATUS_LABELS = {
    'confirmed': "Confirmado",
    'completed': "Concluído",
    'cancelled': "Cancelado",
}

# ── Meldungen ─────────────────────────────────────────────────────────────
MSG_APPOINTMENT_NOT_FOUND = "Agendamento não encontrado"
MSG_APPOINTMENT_COMPLETED = "Atendimento concluído!"
MSG_APPOINTMENT_NOT_CONFIRMED = "Só agendamentos confirmados podem ser concluídos"
CASHFLOW_COMPLETION_DESCRIPTION = "Atendimento concluído"
MSG_COMMISSION_PAID = "Comissão marcada como paga!"
MSG_LOAD_ERROR = "Erro ao carregar dados: {error}"
MSG_SAVE_ERROR = "Erro ao salvar: {error}"
MSG_CONFIG_INCOMPLETE = "Configuração do backend incompleta (URL, chave ou salão)"
MSG_EXPORT_DONE = "Arquivo gerado: {path}"
MSG_COMMISSION_NOT_FOUND = "Comissão não encontrada"
MSG_EXPORT_ERROR = "Erro ao exportar: {error}"
