# proompt

A command-line tool for keeping prompt files in a few well-known places and
using them with placeholder substitution.

## Installation

```
pip install .
```

The picker and copy commands are run through `sh`, so a POSIX shell is
expected.

## Where prompts live

Prompts are `.md` or `.txt` files (the extension is matched in any case). They
are looked up in four locations, in this order of precedence:

1. **directory**: `./prompts/` in the current directory
2. **project**: `prompts/` at the project root (the nearest directory, going
   upward from the current one, that holds `.git` or `prompts/`)
3. **project-local**: `.git/info/prompts/` at the project root
4. **user**: `proompt/prompts/` under your user configuration directory
   (`$XDG_CONFIG_HOME`, or `~/.config`; `~/Library/Application Support` on
   macOS; `%AppData%` on Windows)

The first three are used only when the directory exists; the user location is
always included. A prompt's name is its file name without the extension. When
the same name appears in several locations, the one found first wins, and a
file reached through two locations is listed once.

## Commands

```
proompt list                 # list every prompt with its source and path
proompt show NAME            # print a prompt's name, source, path and content
proompt edit [NAME]          # open a prompt in your editor
proompt rm [NAME]            # remove a prompt
proompt pick                 # choose a prompt, fill in placeholders, print it
```

When `edit` or `rm` is run without a name, the picker is used to choose one.
`edit` of an existing prompt opens its file. To create a new prompt, give
`edit` a name that does not exist yet together with exactly one location flag;
the file `NAME.md` is created empty and then opened:

```
proompt edit review --project
proompt edit notes --directory
proompt edit scratch --project-local
proompt edit daily --user
```

A location flag is refused for a prompt that already exists, and without a
name. Errors are printed to standard error and the command exits with status 1.

## Placeholders

Prompt content may contain `${NAME}` or `${NAME:-default}`. Write `$$` for a
literal dollar sign. A placeholder with no value and no default becomes empty.

`proompt pick` lets you choose a prompt with the picker. If it has no
placeholders, it is printed and handed to the copy command straight away.
Otherwise a temporary Markdown file is opened in your editor, with YAML front
matter holding one entry per placeholder, preset to its default, followed by
the prompt template:

```
---
NAME: World
---
Hello ${NAME}!
```

Change the values (or the template itself), save and quit. The filled-in
template is printed and handed to the copy command; if copying fails, a
warning is printed and the output still stands. Saving an empty file aborts.
Front matter that is not valid YAML, or is never closed by a `---` line, is
reported as an error.

## Configuration

| Variable               | Purpose                                   | Default  |
|------------------------|-------------------------------------------|----------|
| `EDITOR`               | Editor used by `edit` and `pick`          | `nano`   |
| `PROOMPT_PICKER`       | Shell command that selects one input line | `fzf`    |
| `PROOMPT_COPY_COMMAND` | Shell command that receives the result    | `pbcopy` |

The picker command receives one line per prompt, `NAME (SOURCE)`, on standard
input and must print the chosen line.

## Use as a library

The pieces behind the commands can be used directly:

- `proompt.manager.DefaultManager` lists, reads, creates and deletes prompts
  over a filesystem and a location resolver
  (`proompt.resolver.DefaultLocationResolver`).
- `proompt.parser.DefaultParser` finds placeholders and substitutes values.
- `proompt.pick.run_pick` runs the whole pick workflow and returns the result.
- `proompt.filesystem.FakeFilesystem`, `proompt.picker.FakePicker`,
  `proompt.editor.FakeEditor`, `proompt.copier.FakeCopier`,
  `proompt.parser.FakeParser` and `proompt.resolver.FakeLocationResolver` are
  in-memory stand-ins for tests.