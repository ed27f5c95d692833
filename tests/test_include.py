import pytest

from candela.include import (
    IncludeDirective,
    IncludeError,
    LineDirectives,
    find_includes,
    include_file,
    include_string,
    include_strings,
)


def test_find_includes_locates_include_line():
    text = 'a\n#include "b.glsl"\nc'
    found = find_includes(text)
    start = text.index("#include")
    assert found == [IncludeDirective(start, text.index("\nc"), "b.glsl", 3)]


def test_find_includes_inject_has_no_filename():
    text = "x\n  #  inject\ny"
    found = find_includes(text)
    assert len(found) == 1
    assert found[0].is_inject
    assert found[0].offset == text.index("  #")


def test_find_includes_inject_at_end_of_text():
    text = "#inject"
    found = find_includes(text)
    assert found == [IncludeDirective(0, len(text), None, 2)]


def test_find_includes_ignores_angle_brackets_and_unterminated():
    text = '#include <a.h>\n#include "broken\n#includex "c"\n'
    assert find_includes(text) == []


def test_find_includes_counts_crlf_as_one_break():
    text = 'one\r\ntwo\r\n#include "f"\r\n'
    (directive,) = find_includes(text)
    assert directive.next_line_after == 4
    assert text[directive.end] == "\r"


def test_include_string_replaces_include(tmp_path):
    (tmp_path / "a.glsl").write_text("A", encoding="utf-8")
    result = include_string('#include "a.glsl"\nrest', None, tmp_path)
    assert result == "A\nrest"


def test_include_string_nested(tmp_path):
    (tmp_path / "outer.glsl").write_text('o1\n#include "inner.glsl"\no2', encoding="utf-8")
    (tmp_path / "inner.glsl").write_text("INNER", encoding="utf-8")
    result = include_string('#include "outer.glsl"\nend', None, tmp_path)
    assert result == "o1\nINNER\no2\nend"


def test_include_string_inject():
    assert include_string("top\n#inject\nbottom", "INJ") == "top\nINJ\nbottom"
    assert include_string("top\n#inject\nbottom") == "top\n\nbottom"


def test_include_string_without_directives_is_unchanged():
    text = "void main() {}\n"
    assert include_string(text) == text


def test_include_string_missing_file_raises(tmp_path):
    with pytest.raises(IncludeError, match="missing.glsl"):
        include_string('#include "missing.glsl"\n', None, tmp_path)


def test_include_string_c_line_directives(tmp_path):
    (tmp_path / "a.glsl").write_text("A", encoding="utf-8")
    result = include_string(
        '#include "a.glsl"\nrest', None, tmp_path, "main", LineDirectives.C
    )
    expected = (
        "#line" + " " * 7 + "1" + "  " + '"a.glsl"\n'
        + "A"
        + "\n#line" + " " * 6 + "2" + "  " + "main"
        + "\nrest"
    )
    assert result == expected


def test_include_string_glsl_skips_leading_line_directive(tmp_path):
    (tmp_path / "a.glsl").write_text("A", encoding="utf-8")
    result = include_string('#include "a.glsl"\n', None, tmp_path, None, LineDirectives.GLSL)
    assert result.startswith("A\n#line")


def test_include_string_glsl_writes_leading_directive_after_text(tmp_path):
    (tmp_path / "a.glsl").write_text("A", encoding="utf-8")
    result = include_string('x\n#include "a.glsl"\n', None, tmp_path, None, LineDirectives.GLSL)
    assert result.startswith("x\n#line")
    assert result.count("#line") == 2


def test_include_strings_concatenates(tmp_path):
    (tmp_path / "a.glsl").write_text("A", encoding="utf-8")
    result = include_strings(["pre\n", '#include "a.glsl"', "\npost"], None, tmp_path)
    assert result == "pre\nA\npost"


def test_include_file_reads_and_processes(tmp_path):
    (tmp_path / "lib.glsl").write_text("LIB", encoding="utf-8")
    main = tmp_path / "main.glsl"
    main.write_text('#version 430\n#include "lib.glsl"\nvoid main(){}', encoding="utf-8")
    result = include_file(main, "", tmp_path)
    assert result == "#version 430\nLIB\nvoid main(){}"


def test_include_file_missing_raises(tmp_path):
    with pytest.raises(IncludeError, match="couldn't load"):
        include_file(tmp_path / "nope.glsl")