# fastparsex

Small readers for CSV, log and binary files. The package also has a timing
helper for them. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
fastparsex binary [PATH]   # prints "Read N bytes"        (default PATH: sample.bin)
fastparsex csv [PATH]      # prints "Row: [f1] [f2] ..."  (default PATH: sample.csv)
fastparsex log [PATH]      # prints "Record: [f1] ..."    (default PATH: sample.log)
fastparsex export [PATH]   # creates an empty file         (default PATH: output.arrow)

fastparsex-bench {binary,csv,log} [PATH]
```

`fastparsex-bench` reads the file once with the matching reader. It then
prints the elapsed time in seconds, the size in MB and the throughput in
MB/s. Both commands exit with status 1 and print a message if the file
cannot be opened.

## Library use

### CSV

```python
from fastparsex.csv_parser import CSVConfig, CSVParser, CSVReader, split_fields

config = CSVConfig(delimiter=";")
print(split_fields('a;"b;c";d', config))   # ['a', 'b;c', 'd']

with CSVParser("sample.csv", config) as parser:
    for row in parser:          # or parser.next_row(), None at end of file
        print(row)

rows = CSVReader("sample.csv").read_all()
```

How `split_fields` handles text:

- A quote character turns quoting on or off. The quote itself is not kept.
- A delimiter inside quotes stays part of the field.
- A trailing empty field is left out.

`CSVParser` does not split the file into lines. Each "row" it yields is one
chunk of the file, up to 64 KiB, decoded as UTF-8 and split with
`split_fields`. Newlines stay inside the fields. `CSVConfig.has_header` is
stored but has no effect.

The chunks come from `fastparsex.file_reader.FileReader(path, buf_size)`.
It can also be used on its own: call `read_chunk()`, or iterate over it
for the chunks as bytes.

### Logs

```python
from fastparsex.log_parser import LogParser, apache_common, split_line

print(split_line("127.0.0.1 - - GET /index.html"))
# ['127.0.0.1', '-', '-', 'GET', '/index.html']

parser = LogParser("sample.log", apache_common())
parser.on_record(lambda fields: print(fields))
count = parser.parse()          # number of records

for fields in LogParser("sample.log").records():
    print(fields)
```

Each line is split on whitespace, and a NUL character ends the line. The
presets are `apache_common()` (the default), `apache_combined()`, `nginx()`
and `custom(pattern)`. They are kept as `LogParser.config`, but every
format is split the same way. `LogReader` yields the lines of a file
without their newlines.

### Binary

```python
from fastparsex.binary import BinaryParser, BinaryReader

data = BinaryReader("sample.bin").read_all()
block = BinaryParser("sample.bin").read_block(16, 64)
```

`read_block` always returns `length` bytes. Anything past the end of the
file is filled with zero bytes.

### Export

```python
from fastparsex.export import ArrowWriter

ArrowWriter().write("output.arrow")
```

### Timing

`fastparsex.bench` has these helpers:

- `Timer` with `tic()` and `toc()`
- `file_size(path)`
- `format_result(name, seconds, size)`
- `bench_binary(path)`, `bench_csv(path)` and `bench_log(path)`, which
  each return the elapsed seconds

### Errors

If a file cannot be opened or read, `fastparsex.errors.FastParseError` is
raised. Its `code` is an `ErrorCode` such as `FILE_NOT_FOUND` or
`IO_ERROR`.

## What it does not do

- `ArrowWriter.write` creates an empty file. It writes no Arrow or Parquet
  data.
- Parsing is single-threaded. The package has no parallel parsers and no
  profiler.
- The log presets do not parse the fields of Apache or nginx lines. They
  only label the configuration.