from dataclasses import replace

import pytest

from kslibs.command import WARNING_FLAGS, build_command, expand_sources, include_dirs
from kslibs.config import ProjectConfig


@pytest.fixture
def config():
    return ProjectConfig(
        project_name="demo",
        output_name="bin/app",
        source_path="src/",
        headers_path="include/",
        lib_path="NULL/",
        lib_names="NULL",
    )


def test_expand_sources_adds_wildcard_to_directories():
    assert expand_sources("src/;fs/main.cpp") == ["src/*.cpp", "fs/main.cpp"]


def test_expand_sources_keeps_dot():
    assert expand_sources(".") == ["."]


def test_expand_sources_keeps_count_of_entries():
    assert len(expand_sources("a/;b/;c.cpp;d/")) == 4


def test_include_dirs_of_dot_is_empty():
    assert include_dirs(".") == ""


def test_include_dirs_separates_flags():
    text = include_dirs("a;b")
    assert "-Ib" in text
    assert text.endswith(" -I")


def test_include_dirs_drops_header_names_characters():
    text = include_dirs("head/;x/file.hpp")
    assert "h" not in text
    assert "." not in text
    assert "*" not in text


def test_build_command_worked_example(config):
    assert build_command(config) == 'g++ -o "bin/app" src/*.cpp -Iinclude/ ' + WARNING_FLAGS


def test_build_command_with_dot_paths(config):
    cmd = build_command(replace(config, source_path=".", headers_path="."))
    assert cmd.startswith('g++ -o "bin/app" . ')
    assert cmd.endswith(WARNING_FLAGS)


def test_build_command_libraries(config):
    cmd = build_command(
        replace(config, lib_path="libs/x/", lib_names="sfml-graphics;sfml-window")
    )
    assert " -Ilibs/x/include -Llibs/x/lib" in cmd
    assert "-lsfml-graphics" in cmd
    assert "-lsfml-window" in cmd


def test_build_command_without_libraries_has_no_link_flags(config):
    assert "-l" not in build_command(config)
    assert "-L" not in build_command(config)


@pytest.mark.parametrize(
    "source,headers",
    [("src/", "include/"), ("src/;lib/main.cpp", "inc/;more/"), (".", "x/"), ("a/", ".")],
)
def test_build_command_invariants(config, source, headers):
    cfg = replace(config, source_path=source, headers_path=headers)
    before = replace(cfg)
    cmd = build_command(cfg)
    assert cmd.startswith('g++ -o "bin/app" ')
    assert cmd.endswith(WARNING_FLAGS)
    assert "  " not in cmd[: -len(WARNING_FLAGS)]
    assert cfg == before