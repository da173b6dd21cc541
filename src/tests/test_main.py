"""
Tests fuer die Kommandozeile (Parser, Dispatch, fehlende Konfiguration).
"""

from datetime import date
from io import StringIO

import pytest

import main
from config.backend import BackendConfig
from fakes import FakeSalonRepository


@pytest.fixture
def repo():
    return FakeSalonRepository()


def _run(argv, repo):
    out = StringIO()
    code = main.run(main.build_parser().parse_args(argv), repo, main.ConsoleView(out))
    return code, out.getvalue()


def test_parser_defaults():
    args = main.build_parser().parse_args(['agenda', '--date', '2025-03-10'])
    assert args.date == date(2025, 3, 10)
    assert args.professional == 'all'

    args = main.build_parser().parse_args(['commission', 'apt-1'])
    assert args.method == 'cash'
    assert args.installments == 1
    assert not args.complete


def test_parser_rejects_unknown_method():
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(['commission', 'apt-1', '--method', 'cheque'])


def test_commission_preview(repo):
    code, out = _run(['commission', 'apt-1', '--method', 'credit_card', '--installments', '2'], repo)
    assert code == 0
    assert 'Cartão de Crédito 2x' in out
    assert 'R$ 46,75' in out
    assert repo.completed == []


def test_commission_complete(repo):
    code, out = _run(['commission', 'apt-1', '--complete'], repo)
    assert code == 0
    assert len(repo.completed) == 1
    assert 'Atendimento concluído!' in out


def test_commission_unknown_appointment(repo, capsys):
    code, _ = _run(['commission', 'nope'], repo)
    assert code == 1
    assert 'Agendamento não encontrado' in capsys.readouterr().err


def test_installments_and_pay(repo):
    code, out = _run(['installments'], repo)
    assert code == 0
    assert '2x (taxa: 5%)' in out

    assert _run(['pay', 'c1'], repo)[0] == 0
    assert repo.paid == ['c1']


def test_slots_and_agenda(repo):
    code, out = _run(['slots', 'p1', '--date', '2025-03-10'], repo)
    assert code == 0
    assert '08:00' in out and '19:30' in out

    code, out = _run(['agenda', '--date', '2025-03-10'], repo)
    assert code == 0
    assert 'Nenhum horário ocupado neste dia' in out


def test_main_requires_complete_config(monkeypatch):
    monkeypatch.setattr(main, 'setup_logging', lambda level: None)
    monkeypatch.setattr(main, 'load_backend_config', lambda: BackendConfig())
    assert main.main(['installments']) == 2


def test_month_view(repo):
    code, out = _run(['month', '--date', '2025-03-10'], repo)
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == 'março de 2025'
    assert lines[1].split() == ['Dom', 'Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sáb']
    assert lines[2].split() == ['(23)', '(24)', '(25)', '(26)', '(27)', '(28)', '1']
    assert '10*' in lines[4].split()
    assert len(lines) == 8
