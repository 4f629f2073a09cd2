"""End-to-end CLI tests with click's CliRunner against a temporary data dir."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli import checkout_commands
from storefront.infrastructure.cli.main import cli
from tests.fakes import FakePaymentProvider


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {
        "STOREFRONT_DATA_DIR": str(tmp_path),
        "STOREFRONT_PAYMENT_PROVIDER": "simulated",
        "STOREFRONT_PAYMENT_DELAY": "0",
        "STOREFRONT_PAYMENT_DECLINE": "",
        "STOREFRONT_ADMIN_PASSCODE": "letmein",
        "OPENAI_API_KEY": "",
        "LOG_LEVEL": "CRITICAL",
    }

    def invoke(*args, input=None, **overrides):
        return runner.invoke(cli, list(args), env={**env, **overrides}, input=input)

    return invoke


class TestCatalogCommands:

    def test_list_shows_seed_catalog(self, run):
        result = run("catalog", "list")
        assert result.exit_code == 0, result.output
        assert "TaskFlow Pro" in result.output
        assert "$29.00/mo" in result.output

    def test_list_filters(self, run):
        result = run(
            "catalog", "list", "--category", "Cybersecurity",
            "--max-price", "100", "--min-rating", "4.5",
        )
        assert result.exit_code == 0, result.output
        assert "MonitoringPro" in result.output
        assert "CyberConsult" in result.output
        assert "Security Audit" not in result.output
        assert "TaskFlow Pro" not in result.output

    def test_list_query(self, run):
        result = run("catalog", "list", "--query", "figma")
        assert "UIUX Design Kit" in result.output
        assert "TaskFlow Pro" not in result.output

    def test_list_no_matches(self, run):
        result = run("catalog", "list", "--max-price", "1")
        assert "No products match" in result.output

    def test_ai_without_key_falls_back_to_text(self, run):
        result = run("catalog", "list", "--query", "crypto", "--ai")
        assert result.exit_code == 0, result.output
        assert "CryptoBot X" in result.output

    def test_show(self, run):
        result = run("catalog", "show", "--id", "t1")
        assert result.exit_code == 0, result.output
        assert "CryptoBot X" in result.output
        assert "WARNING: Trading involves risk" in result.output
        assert "[Instant Access]" in result.output

    def test_show_unknown(self, run):
        result = run("catalog", "show", "--id", "zzz")
        assert result.exit_code != 0
        assert "not found" in result.output


class TestCheckoutCommand:

    def test_successful_checkout_records_order_and_owned_items(self, run, tmp_path):
        result = run(
            "checkout", "--customer", "Alice", "--email", "alice@example.com",
            "--items", "s1:2,t1:1",
        )
        assert result.exit_code == 0, result.output
        assert "Transaction complete." in result.output
        assert "$157.00" in result.output

        orders = json.loads((tmp_path / "orders.json").read_text(encoding="utf-8"))
        assert len(orders) == 1
        assert orders[0]["total"] == "157.00"
        owned = run("owned", "list")
        assert "TaskFlow Pro" in owned.output
        assert "CryptoBot X" in owned.output

    def test_declined_checkout_writes_nothing(self, run, tmp_path):
        result = run(
            "checkout", "--customer", "Alice", "--email", "a@x.io", "--items", "s1",
            STOREFRONT_PAYMENT_DECLINE="true",
        )
        assert result.exit_code != 0
        assert "not completed" in result.output
        assert json.loads((tmp_path / "orders.json").read_text(encoding="utf-8")) == []

    def test_unknown_product(self, run):
        result = run("checkout", "--customer", "A", "--email", "a@x.io", "--items", "nope:1")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_bad_quantity(self, run):
        result = run("checkout", "--customer", "A", "--email", "a@x.io", "--items", "s1:two")
        assert result.exit_code == 2
        assert "Invalid quantity" in result.output

    def test_blank_name_rejected(self, run):
        result = run("checkout", "--customer", " ", "--email", "a@x.io", "--items", "s1")
        assert result.exit_code != 0
        assert "name is required" in result.output

    def test_provider_closed_after_checkout(self, run, monkeypatch):
        provider = FakePaymentProvider()
        monkeypatch.setattr(checkout_commands, "payment_provider", lambda: provider)
        result = run("checkout", "--customer", "Alice", "--email", "a@x.io", "--items", "s1")
        assert result.exit_code == 0, result.output
        assert provider.closed

    def test_provider_closed_when_checkout_fails(self, run, monkeypatch):
        provider = FakePaymentProvider()
        monkeypatch.setattr(checkout_commands, "payment_provider", lambda: provider)
        result = run("checkout", "--customer", "A", "--email", "a@x.io", "--items", "nope:1")
        assert result.exit_code != 0
        assert provider.closed
        assert provider.requests == []


class TestAdminCommands:

    def test_wrong_passcode(self, run):
        result = run("admin", "--passcode", "guess", "orders", "list")
        assert result.exit_code != 0
        assert "Access denied" in result.output

    def test_product_lifecycle(self, run):
        added = run(
            "admin", "--passcode", "letmein", "product", "add",
            "--name", "Threat Radar", "--price", "79", "--category", "Cybersecurity",
            "--billing", "Subscription", "--specs", "Alerts, Reports",
        )
        assert added.exit_code == 0, added.output
        assert "threat-radar" in added.output
        assert "$79.00/mo" in added.output

        updated = run(
            "admin", "--passcode", "letmein", "product", "update",
            "--id", "threat-radar", "--price", "89",
        )
        assert updated.exit_code == 0, updated.output
        assert "$89.00/mo" in run("catalog", "show", "--id", "threat-radar").output

        deleted = run("admin", "--passcode", "letmein", "product", "delete", "--id", "threat-radar")
        assert deleted.exit_code == 0, deleted.output
        assert run("catalog", "show", "--id", "threat-radar").exit_code != 0

    def test_update_unknown_product(self, run):
        result = run("admin", "--passcode", "letmein", "product", "update", "--id", "zzz",
                     "--price", "1")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_orders_list_and_reset(self, run):
        run("checkout", "--customer", "Alice", "--email", "a@x.io", "--items", "c1")

        listed = run("admin", "--passcode", "letmein", "orders", "list")
        assert "Orders: 1" in listed.output
        assert "Revenue: $299.00" in listed.output

        refused = run("admin", "--passcode", "letmein", "orders", "reset", input="n\n")
        assert refused.exit_code != 0
        assert "Orders: 1" in run("admin", "--passcode", "letmein", "orders", "list").output

        reset = run("admin", "--passcode", "letmein", "orders", "reset", "--yes")
        assert reset.exit_code == 0, reset.output
        assert "1 order(s) removed" in reset.output
        assert "No orders yet." in run("admin", "--passcode", "letmein", "orders", "list").output
        assert "No owned items yet." in run("owned", "list").output

    def test_backup_round_trip(self, run, tmp_path):
        backup_file = tmp_path / "backup.json"
        exported = run("admin", "--passcode", "letmein", "backup", "export",
                       "--output", str(backup_file))
        assert exported.exit_code == 0, exported.output
        document = json.loads(backup_file.read_text(encoding="utf-8"))
        assert document["version"] == "1.0"

        run("admin", "--passcode", "letmein", "product", "delete", "--id", "s1")
        restored = run("admin", "--passcode", "letmein", "backup", "import", str(backup_file))
        assert restored.exit_code == 0, restored.output
        assert "26 product(s)" in restored.output
        assert run("catalog", "show", "--id", "s1").exit_code == 0

    def test_backup_import_malformed(self, run, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        result = run("admin", "--passcode", "letmein", "backup", "import", str(bad))
        assert result.exit_code != 0
        assert "Invalid backup file" in result.output

    def test_backup_import_non_utf8(self, run, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_bytes(b'{"products": [\xff\xfe]}')
        result = run("admin", "--passcode", "letmein", "backup", "import", str(bad))
        assert result.exit_code == 1
        assert "Invalid backup file" in result.output


class TestChatAndConfig:

    def test_chat_requires_api_key(self, run):
        result = run("chat", "--message", "hello")
        assert result.exit_code != 0
        assert "OPENAI_API_KEY" in result.output

    def test_gateway_without_url_is_a_config_error(self, run):
        result = run("catalog", "list", STOREFRONT_PAYMENT_PROVIDER="gateway",
                     STOREFRONT_PAYMENT_URL="")
        assert result.exit_code != 0
        assert "Configuration error" in result.output
