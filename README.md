# pa55vault

`pa55` is a small command-line tool that generates passwords and keeps them in a
vault file, `vault.json`, in your home directory. Every password is encrypted
with AES-256-CBC before it is written, and each entry also records a title and
a URL so you can see what the password belongs to.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

The vault file must already exist and hold a JSON array. An empty one is enough:

```
echo "[]" > ~/vault.json
```

To generate a new password and store it:

```
pa55 generate "My Mail" https://mail.example.com
```

A password is 12 characters long. It always has at least one uppercase letter,
one lowercase letter, one digit and one symbol from `!#$%&()-@_<>`, and its
characters are shuffled.

To list the stored entries:

```
pa55 list
```

```
1 - Title: My Mail, URL: https://mail.example.com
```

To copy a stored password to the clipboard, give the ID that `list` shows:

```
pa55 get 1
```

The clipboard is reached through `tkinter`, so this needs a Python with Tk
support and a graphical session. If the clipboard cannot be used, the command
reports an error.

To show help, in general or for one command:

```
pa55 help
pa55 generate help
pa55 list help
pa55 get help
```

`pa55 list help` shows the general help text.

Command names and the word `help` are not case-sensitive. If the arguments are
wrong, the vault file is missing or malformed, or an ID does not exist, `pa55`
prints `Error: ...` and exits with status 1. `pa55 -h` prints a short usage
line and exits with status 0. Any other leading option is rejected with exit
status 2. A leading `--` is ignored.

## Library use

The same pieces can be used from Python:

- `pa55vault.vault.Vault` is one entry, with the fields `title`, `url`, `code`
  and `iv`. `generate_code()` fills `code` with a new password, `encrypt()`
  encrypts it in place, and `decrypt()` returns the plain password or raises
  `DecryptError`. `to_dict()` and `Vault.from_dict()` convert an entry to and
  from its JSON form. `pkcs7_pad()` and `pkcs7_unpad()` are the padding helpers.
- `pa55vault.store.Store(file_path)` reads and writes the vault file with
  `read()` and `write(vaults)`.
- `pa55vault.action.Action` lists the commands, and `help_text(action)` returns
  the help shown for one of them.
- `pa55vault.executor` holds `generate()`, `list_vaults()`, `get()` and
  `execute()`. `get()` takes the function that receives the decrypted password,
  so it can be used without a clipboard. It raises `NotFoundError` for an
  unknown ID. `copy_to_clipboard()` is the clipboard function the command uses.
- `pa55vault.handler.Handler(args)` checks the arguments with `validate()`,
  which raises `UsageError`, and interprets them into a `Sub` with `mapper()`.
  `run(file_path)` does both and then executes the command against
  `file_path`, or against `default_vault_path()` when no path is given.
- `pa55vault.cli.main(argv)` is the `pa55` command. It returns the exit status.

## What it does not do

`pa55` does not create the vault file, and it offers no way to edit, rename or
delete entries. Change those by hand in `vault.json`. It also has no option for
password length or character set.

## A note on security

The encryption key is fixed and the same in every installation. The vault file
stops passwords from being read at a glance, and no more. Anyone who has the
package can decrypt it.