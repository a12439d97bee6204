from portfolio_chat.config import Settings
from portfolio_chat.selftest import run_selftest


def test_selftest_ok(knowledge_file):
    assert run_selftest(Settings(knowledge_base=knowledge_file)) is True


def test_selftest_bad_knowledge_base(tmp_path):
    assert run_selftest(Settings(knowledge_base=tmp_path / "missing.json")) is False
