"""Unit tests for the spend_points command line entry point"""

import pytest
from unittest.mock import MagicMock

from points_ledger.app.services.transaction_reader import TransactionReader, TransactionSourceError
from points_ledger.cli.spend_points import format_balances, main, run

REFERENCE_CSV = '''"payer","points","timestamp"
"DANNON",300,"2020-10-31T10:00:00Z"
"UNILEVER",200,"2020-10-31T11:00:00Z"
"DANNON",-200,"2020-10-31T15:00:00Z"
"MILLER COORS",10000,"2020-11-01T14:00:00Z"
"DANNON",1000,"2020-11-02T14:00:00Z"
'''


@pytest.fixture
def reference_file(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text(REFERENCE_CSV)
    return str(path)


class TestFormatBalances:
    """Test the output rendering"""

    def test_renders_in_mapping_order(self):
        assert format_balances({"DANNON": 1000, "UNILEVER": 0}) == "{DANNON: 1000, UNILEVER: 0}"

    def test_empty_mapping(self):
        assert format_balances({}) == "{}"


class TestRun:
    """Test the run() flow with output on stdout"""

    def test_prints_balances(self, reference_file, capsys):
        # Act
        status = run(5000, reference_file)

        # Assert
        assert status == 0
        assert capsys.readouterr().out.strip() == "{MILLER COORS: 5300, DANNON: 1000, UNILEVER: 0}"

    def test_insufficient_points_message(self, reference_file, capsys):
        # Act
        status = run(20000, reference_file)

        # Assert
        assert status == 1
        assert capsys.readouterr().out.strip() == "Not enough points left"

    def test_no_earnings_message(self, tmp_path, capsys):
        # Arrange
        path = tmp_path / "spends.csv"
        path.write_text("payer,points,timestamp\nDANNON,-200,2020-10-31T15:00:00\n")

        # Act
        status = run(10, str(path))

        # Assert
        assert status == 1
        assert capsys.readouterr().out.strip() == "No available point balance"

    def test_missing_file_message(self, tmp_path, capsys):
        # Act
        status = run(10, str(tmp_path / "nope.csv"))

        # Assert
        assert status == 1
        assert capsys.readouterr().out.strip() == "File does not exist"

    def test_malformed_source_message(self, capsys):
        # Arrange
        reader = MagicMock(spec=TransactionReader)
        reader.read.side_effect = TransactionSourceError("line 2: bad points")

        # Act
        status = run(10, "ignored.csv", reader=reader)

        # Assert
        assert status == 1
        assert "line 2: bad points" in capsys.readouterr().out


class TestMain:
    """Test argument parsing"""

    def test_main_runs_end_to_end(self, reference_file, capsys):
        # Act
        status = main(["5000", reference_file])

        # Assert
        assert status == 0
        assert "MILLER COORS: 5300" in capsys.readouterr().out

    @pytest.mark.parametrize("amount", ["0", "-5", "abc"])
    def test_rejects_invalid_amount(self, amount, reference_file):
        with pytest.raises(SystemExit) as exc_info:
            main([amount, reference_file])
        assert exc_info.value.code == 2
