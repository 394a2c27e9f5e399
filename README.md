# bootkit

A small set of boot-loader building blocks. The package is pure Python and
has no third-party dependencies.

## Modules

- `bootkit.md5` and `bootkit.sha256` provide streaming hashers, `Md5` and
  `Sha256`, each with `update(data)`, `digest()` and `hexdigest()`. Calling
  `digest()` leaves the hasher usable. The one-shot helpers `md5(data)` and
  `sha256(data)` return the raw digest bytes.
- `bootkit.hashing` provides `get_hash(hash_type, data)`. It uses SHA-256
  when `hash_type` is `HashType.SHA_256` and MD5 for any other value.
  `format_hash(digest)` renders a digest as lower-case hex. `print_hash(digest,
  file=None)` writes that hex and a newline to `file`, or to standard output
  when no file is given.
- `bootkit.printf` is a minimal formatter with three functions:
  - `sprintf(fmt, *args)` returns the formatted text.
  - `printf(fmt, *args, out=None)` writes the text and returns the number of
    characters.
  - `puts(text, out=None)` writes the text followed by a newline and returns
    the number of characters.

  It supports `%s %c %d %u %x %p`, the `z`, `l` and `ll` size prefixes, and
  `%%`.
  - Width digits, `-` and `.` are accepted and ignored.
  - A conversion the formatter does not know produces `?`.
  - Plain `%d`, `%u` and `%x` treat their argument as a 32-bit signed int
    that is widened to 64 bits unsigned. For example, `sprintf("%d", -1)`
    gives `18446744073709551615`.
  - If the format needs more arguments than were given, a `ValueError` is
    raised.
- `bootkit.cpio_strip` removes host metadata from a `newc` CPIO archive so
  that builds are reproducible.
  - `iter_entries(data)` yields a `CpioEntry` for each file up to the
    trailer. Each `CpioEntry` has `name`, `header_offset`, `data_offset` and
    `data`.
  - `strip(data)` returns a copy of the archive. In the copy, each entry's
    inode field holds `11 + index` in hex, NUL-terminated within the field.
    Its UID, GID and mtime fields are zeroed.
  - `strip_file(path)` does the same to a file in place.
  - An archive that is malformed raises `CpioError`, a subclass of
    `ValueError`.
- `bootkit.devices` models how drivers are matched to devices.
  - `Driver` holds a match table of compatible strings or
    `(compatible, match_data)` pairs, a `DriverType`, an `init(device,
    match_data)` callback and `ops`.
  - `Device` holds a compatible string, region bases and the bound driver.
  - `table_has_match(compat, table)` returns the index of the match, or
    `None` if there is none.
  - `init_device` binds and initialises one device. It does this for every
    driver whose table matches the device.
  - `initialise_devices` does the same for each device in a list.
  - `SmpRegistry.register_handler(device)` keeps the device only if its
    driver is an SMP driver.
  - `SmpRegistry.cpu_on(cpu, entry, stack)` calls the driver's
    `ops.cpu_on(device, cpu, entry, stack)` and returns what it returns. It
    raises `RuntimeError` if no SMP driver is registered. It raises
    `ValueError` if the `Cpu`'s `enable_method` differs from the driver's.

## Usage

```python
from bootkit.hashing import HashType, get_hash, format_hash
from bootkit.printf import sprintf

digest = get_hash(HashType.SHA_256, b"kernel image")
print(format_hash(digest))
print(sprintf("loaded %s at %p (%zu bytes)", "kernel", 0x80000000, 4096))
```

## Command line

To strip metadata from an archive in place:

```
cpio-strip archive.cpio
```

The command exits with status 1 and a message on standard error in any of
these cases:

- it is not given exactly one argument;
- the file cannot be read or written;
- the file is not a valid archive.

## What it does not do

The package does not read flattened device-tree headers. It has no console
or UART model: `printf` and `puts` write to a Python text stream, not to
device registers. It does not drive hardware or start real CPUs. The driver
model only calls the callbacks you give it.

## Tests

```
pip install -e ".[test]"
pytest
```