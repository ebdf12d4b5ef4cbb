"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from autopos.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args, role="store_owner", user="owner", name=None):
        options = ["--data-dir", str(tmp_path), "--user", user, "--role", role]
        if name:
            options += ["--name", name]
        return runner.invoke(cli, [*options, *args])

    return invoke


def _seed(run):
    result = run("product", "add", "--name", "Brake Pad Set", "--price", "50000",
                 "--stock", "10", "--part-number", "BP-001")
    assert result.exit_code == 0, result.output
    result = run("product", "add", "--name", "Air Filter", "--price", "125000",
                 "--stock", "4", "--min-stock", "5")
    assert result.exit_code == 0, result.output


def test_menu_depends_on_role(run):
    result = run("menu", role="warehouse_admin")
    assert result.exit_code == 0
    assert "stock" in result.output
    assert "pos" not in result.output


def test_role_without_access_is_refused(run):
    result = run("product", "add", "--name", "X", "--price", "1", role="shopkeeper")
    assert result.exit_code != 0
    assert "cannot access 'Manage Products'" in result.output


def test_product_add_and_list(run):
    _seed(run)
    result = run("product", "list")
    assert result.exit_code == 0
    assert "Brake Pad Set" in result.output
    assert "Air Filter" in result.output
    assert "(low)" in result.output


def test_full_sale_flow(run):
    _seed(run)
    assert run("shift", "open", "--opening-cash", "500000").exit_code == 0

    result = run("sale", "checkout", "--items", "BP-001:2,Air Filter",
                 "--payment", "cash", "--tendered", "300000")
    assert result.exit_code == 0, result.output
    assert "Transaction #1 recorded: Rp 249.750 (cash)" in result.output
    assert "Change due: Rp 50.250" in result.output
    assert "Tax (PPN 11%):" in result.output

    report = run("stock", "report")
    assert "Stock value:   Rp 775.000" in report.output

    result = run("shift", "close", "--closing-cash", "749750")
    assert result.exit_code == 0, result.output
    assert "Variance:      Rp 0" in result.output


def test_checkout_requires_open_shift(run):
    _seed(run)
    result = run("sale", "checkout", "--items", "BP-001:1")
    assert result.exit_code != 0
    assert "Open a shift before starting a sale" in result.output


def test_insufficient_cash_is_reported(run):
    _seed(run)
    run("shift", "open", "--opening-cash", "0")
    result = run("sale", "checkout", "--items", "BP-001:2,Air Filter:1",
                 "--tendered", "200000")
    assert result.exit_code != 0
    assert "less than the total" in result.output


def test_stock_move_and_history(run):
    _seed(run)
    result = run("stock", "move", "--product", "BP-001", "--type", "out",
                 "--quantity", "15", role="warehouse_admin")
    assert result.exit_code == 0, result.output
    assert "Stock for product #1: 10 -> 0 (ledger -15)" in result.output

    history = run("stock", "history", role="warehouse_admin")
    assert "Brake Pad Set" in history.output
    assert "-15" in history.output


def test_quote_prints_totals(run):
    _seed(run)
    result = run("sale", "quote", "--items", "BP-001:2,Air Filter:1",
                 "--tendered", "300000")
    assert result.exit_code == 0, result.output
    assert "Rp 249.750" in result.output
    assert "Rp 50.250" in result.output


def test_reprinted_receipt_names_the_cashier(run):
    _seed(run)
    run("shift", "open", "--opening-cash", "0", user="kasir-1", role="shopkeeper")
    result = run("sale", "checkout", "--items", "BP-001:1", "--no-print-receipt",
                 user="kasir-1", name="Sari Wulandari", role="shopkeeper")
    assert result.exit_code == 0, result.output

    reprint = run("sale", "receipt", "--id", "1", role="store_owner")
    assert reprint.exit_code == 0, reprint.output
    assert "Sari Wulandari" in reprint.output
    assert "kasir-1" not in reprint.output
