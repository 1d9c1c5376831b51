"""Report runner tests."""

from datetime import date

from stores.cli import main


class TestMain:
    def test_prints_report_and_exits_zero(self, capsys):
        exit_code = main(date(2024, 6, 1))
        out = capsys.readouterr().out.splitlines()

        assert exit_code == 0
        assert out[0] == "=== 24시간 학교 편의점 스마트 재고 관리 시스템==="
        assert "- 오늘 총 매출: 188,400 (15+12+10+8+7+3+17 = 72개 판매)" in out
        assert out[-1] == "- 시스템 처리 완료: 100%."

    def test_defaults_to_today(self, capsys):
        assert main() == 0
        assert "- 유통기한 임박: 3종 (3일 이내)" in capsys.readouterr().out
