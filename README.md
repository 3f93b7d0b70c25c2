# minishell

A small interactive shell front end. Each line you type is split into
words, the words are classified (pipes, `<`, `<<`, `>`, `>>`), and the
result is grouped into commands with their arguments, input file, output
file and append flag. Both the token list and the parsed commands are
printed, so you can watch how a line is understood.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
minishell
```

At the `bash>` prompt, type a command line such as:

```
cat < input.txt | grep foo >> out.txt
```

The shell prints every token with its index and numeric type, then every
command with its arguments, `infile`, `outfile` and `append` (0 or 1).
A command with no arguments is shown with `args[0]: NULL`.

A line whose first command's first word begins with `exit` prints
`Saliendo de la shell...` and ends the shell with status 0. End of input
(Ctrl-D) prints a newline and the same farewell, and also ends with
status 0. Line editing and history are used when Python's `readline`
module is available.

## How a line is understood

- Words are separated by spaces, tabs and newlines; runs of these never
  produce empty words.
- A word is classified by how it begins: `|` is a pipe, `<<` a heredoc
  marker, `>>` append, `<` input redirection, `>` output redirection;
  anything else is a plain word. Operators must be separated from their
  neighbours by blanks (`a|b` is a single word starting with `a`).
- A pipe ends the current command; several pipes in a row do not create
  empty commands.
- `<`, `>` and `>>` take the next word as their file name. A later
  redirection of the same kind replaces an earlier one. A redirection at
  the very end of the line is ignored.

## What it does not do

The package only reads, classifies and groups command lines. It does not
run programs, open or create the redirection files, connect pipes,
expand variables or wildcards, honour quotes, or read heredoc input
(`<<` markers are recognised by the lexer but not acted on by the
parser). `exit` is the only built-in.

## Library use

The pieces can be used on their own:

```python
from minishell.lexer import lex, format_tokens
from minishell.parser import parse, format_commands

tokens = lex("ls -l > listing.txt")
print(format_tokens(tokens), end="")

commands = parse(tokens)
print(format_commands(commands), end="")
```

- `minishell.tokenizer.tokenize(text, delimiters=" \t\n")` yields the
  runs of `text` that contain no delimiter character.
- `minishell.lexer.lex(text)` returns a list of `Token` objects, each
  with `index`, `data` and `type` (a `TokenType`).
  `format_tokens(tokens)` renders them one per line.
- `minishell.parser.parse(tokens)` returns a list of `Command` objects
  with `args`, `infile`, `outfile` and `append`.
  `format_commands(commands)` renders them.
- `minishell.shell.run(lines, out=None)` drives the lex–parse–print loop
  over any iterable of lines, writing to any text stream (standard output
  by default), and returns the exit status.
- `minishell.shell.exit_shell(out=None)` writes the farewell message and
  raises `ShellExit`, whose `code` attribute holds the status; `run`
  catches it and returns that code.
- `minishell.shell.main(argv=None)` is the `minishell` command.

`minishell.chars` and `minishell.textutils` hold character and string
helpers: ASCII classification and case conversion, `atoi`/`itoa`,
`put_char`/`put_str`/`put_endl`/`put_nbr` writing to a stream, searching
(`strchr`, `strrchr`, `strnstr`, `memchr`), comparison (`strncmp`,
`memcmp`), `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
`striteri`, and bounded copies (`strlcpy`, `strlcat`), which return the
resulting text together with the length the full result would have had.

## Running the tests

```
pip install .[test]
pytest
```