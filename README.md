# kslibs

`kslibs` is a command-line helper for small C++ projects. It keeps a
project's settings in a `.config.kslibs` file in the current directory. It
builds a `g++` command line from those settings and uses it to compile or run
the project.

## Installation

```
pip install .
```

## The configuration file

`.config.kslibs` is a plain text file with one `Key: value` line per setting:

```
ProjectName: demo
OutputName: build/demo
SourcePath: src/;extra/main.cpp
HeadersPath: include/
LibPath: NULL
LibNames: NULL
```

- `SourcePath` and `HeadersPath` hold one or more directories or files,
  separated by `;`. Spaces and a trailing `;` are removed. A directory in
  `SourcePath` becomes `dir/*.cpp` on the command line. Header entries become
  `-I` include flags.
- `LibPath` is the root of an external library. Its `include/` and `lib/`
  folders are added to the search paths. Write `NULL` if there is none.
- `LibNames` lists the libraries to link, without `-l` and separated by `;`.
  Write `NULL` if there are none.

Every setting must be present and non-empty, otherwise the file counts as
corrupt. If the file is missing or corrupt, `kslibs` asks for the path of
another one. You can also type `newkslibs` to create a new `.config.kslibs`
step by step, or `exit` to stop. Stopping this way gives exit status 1.

## Usage

```
kslibs            # show the options and the current project settings
kslibs -c         # delete the old output, then compile (compiler stdout is hidden)
kslibs -r         # compile, then run the output
kslibs -cmd       # print the g++ command that would be used
kslibs -ed        # edit the settings interactively and save them
kslibs -cln       # accepted, but does nothing
kslibs -dowl URL  # download URL into a file named after its last path part
```

If several options are given, only one of them runs. The order of precedence
is `-r`, `-cln`, `-c`, `-ed`, `-cmd`, `-dowl`.

In the editor, type a number from 1 to 6 to change a setting. Type `255` to
finish and write the file.

For `-dowl`, if the environment variable `KSLIBS_DB_URL` is set, the library
listing at that address is fetched and printed before the download. The
download still happens if that listing cannot be fetched.

Escape sequences for colour are written only when the output stream is a
terminal and `TERM` names a colour-capable terminal. `kslibs.colors.set_control_mode`
changes this: `Control.OFF` never colours, `Control.FORCE` always does.

## Using it from Python

```python
from kslibs.config import load_config
from kslibs.command import build_command

config = load_config(".config.kslibs")
print(build_command(config))
```

The modules are:

- `kslibs.config`: `ProjectConfig`, `parse_config`, `load_config`,
  `save_config`, `create_config`, `obtain_config`, and `ConfigError` for
  corrupt files.
- `kslibs.command`: `build_command`, `expand_sources`, `include_dirs`.
- `kslibs.editor`: `ConfigEditor`, the interactive settings editor.
- `kslibs.downloader`: `HTTPDownloader` with `download` (returns text) and
  `download_to_file`. Failures raise `DownloadError`.
- `kslibs.dataparser`: `parse_data_lib`, `lib_names`, `section_spans` and
  `format_data_lib` read library listings whose `-|- ... -/-` sections hold
  `libName: name;` entries.
- `kslibs.colors`: ANSI style enums (`Style`, `Fg`, `Bg`, `FgBright`,
  `BgBright`), `styled` and `print_styled`.
- `kslibs.cli`: `main`, plus `parse_actions`, `compile_project`,
  `run_project`, `download_library` and `help_text`.

## What it does not do

- `-cln` does not remove any build output.
- `-dowl` does not look a library up by name in a catalogue. It needs a full
  URL and saves that file as it is. It does not unpack or install anything.
- Compiling rebuilds everything with one `g++` call. Nothing tracks object
  files or which sources have changed.

## Running the tests

```
pip install .[test]
pytest
```