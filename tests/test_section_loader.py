import re
import zipfile

import pytest
from openpyxl import Workbook

from core.errors import SheetNotFoundError, SheetUnreadableError, WorkbookNotFoundError
from models.activity import Phase
from scenarios.section_loader import SUBSECTIONS, Subsection, build_section, load_section
from tests.utils.helpers import header_rows, make_row


def test_one_activity_per_subsection_with_phases():
    section = build_section(header_rows() + [make_row("A")])

    assert [a.id for a in section.warm_up] == ["A-warm_up"]
    assert [a.id for a in section.exercise_1] == ["A-exercise_1"]
    assert [a.id for a in section.exercise_2] == ["A-exercise_2"]
    assert [a.id for a in section.final_part] == ["A-final_part"]

    assert section.warm_up[0].phase == Phase.WARM_UP
    assert section.exercise_1[0].phase == Phase.MAIN_EXERCISE
    assert section.exercise_2[0].phase == Phase.MAIN_EXERCISE
    assert section.final_part[0].phase == Phase.FINAL_PART


def test_row_order_is_preserved():
    rows = header_rows() + [make_row("A"), make_row("B"), make_row("C")]
    section = build_section(rows)

    for name, activities in section.groups():
        assert [a.id for a in activities] == [f"A-{name}", f"B-{name}", f"C-{name}"]
    assert section.total() == 12


def test_header_rows_are_skipped():
    # Les 3 premières lignes, même complètes, ne sont jamais lues
    rows = [make_row("H1"), make_row("H2"), make_row("H3"), make_row("A")]
    section = build_section(rows)
    assert [a.id for a in section.warm_up] == ["A-warm_up"]


def test_narrow_rows_contribute_nothing():
    rows = header_rows() + [make_row("A", width=67), make_row("B")]
    section = build_section(rows)

    for name, activities in section.groups():
        assert [a.id for a in activities] == [f"B-{name}"]


def test_short_subsection_skipped_while_others_extracted():
    subsections = (
        SUBSECTIONS[0],
        Subsection("final_part", 60, 70, Phase.FINAL_PART),
    )
    row = make_row("A", width=68)

    section = build_section(header_rows() + [row], subsections=subsections)

    assert [a.id for a in section.warm_up] == ["A-warm_up"]
    assert section.final_part == []


def test_content_missing_when_content_block_out_of_range():
    subsections = (Subsection("warm_up", 4, 66, Phase.WARM_UP),)
    section = build_section(header_rows() + [make_row("A")], subsections=subsections)
    assert section.warm_up[0].content == {}


def test_unknown_subsection_name_rejected():
    with pytest.raises(ValueError):
        build_section([], subsections=(Subsection("cool_down", 4, 11, Phase.FINAL_PART),))


def test_empty_sheet_gives_empty_section():
    section = build_section(header_rows())
    assert section.total() == 0


# ------------------------------------------------------------
# load_section (classeur réel)
# ------------------------------------------------------------

def _write_workbook(path, sheet_name, rows):
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    for row in rows:
        ws.append(row)
    wb.save(path)


def test_load_section_from_workbook(tmp_path):
    path = tmp_path / "programming.xlsx"
    rows = header_rows() + [make_row("A"), make_row("B")]
    rows[3][0] = 5
    _write_workbook(path, "1. DERECHA PLANA", rows)

    section = load_section(path, "1. DERECHA PLANA")

    assert [a.id for a in section.exercise_2] == ["A-exercise_2", "B-exercise_2"]
    assert section.warm_up[0].shot_code == 5
    assert section.warm_up[1].shot_code == 3


def test_load_section_missing_sheet(tmp_path):
    path = tmp_path / "programming.xlsx"
    _write_workbook(path, "1. DERECHA PLANA", header_rows())

    with pytest.raises(SheetNotFoundError) as exc:
        load_section(path, "2. REVÉS")
    assert exc.value.error_code == "SHEET_NOT_FOUND"
    assert "1. DERECHA PLANA" in exc.value.available


def test_load_section_missing_file(tmp_path):
    with pytest.raises(WorkbookNotFoundError):
        load_section(tmp_path / "absent.xlsx", "1. DERECHA PLANA")


def test_load_section_corrupt_file(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_text("pas un classeur", encoding="utf-8")

    with pytest.raises(SheetUnreadableError):
        load_section(path, "1. DERECHA PLANA")


def _rewrite_dimension(path, replacement):
    """Réécrit (ou supprime) l'élément <dimension> de la première feuille."""
    with zipfile.ZipFile(path) as src:
        entries = [(info, src.read(info.filename)) for info in src.infolist()]

    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as dst:
        for info, data in entries:
            if info.filename == "xl/worksheets/sheet1.xml":
                data = re.sub(rb"<dimension[^>]*/>", replacement, data)
            dst.writestr(info, data)


@pytest.mark.parametrize("dimension", [b"", b'<dimension ref="A1"/>'])
def test_load_section_ignores_stale_dimension(tmp_path, dimension):
    path = tmp_path / "programming.xlsx"
    row = make_row("A")
    for index in range(62, 68):
        row[index] = None
    _write_workbook(path, "1. DERECHA PLANA", header_rows() + [row])
    _rewrite_dimension(path, dimension)

    section = load_section(path, "1. DERECHA PLANA")

    assert section.total() == 4
    assert [a.id for a in section.final_part] == ["A-final_part"]
