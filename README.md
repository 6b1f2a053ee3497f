# base100

Encode any bytes as emoji and decode them back. Each input byte becomes
exactly one four-byte emoji character. The encoded form is therefore always
valid UTF-8 and four times the size of the input.

## Installation

```
pip install base100
```

## Library use

```python
from base100.codec import encode_to_string, decode_string

text = encode_to_string(b"hello\n")
assert decode_string(text) == b"hello\n"
```

Other functions in `base100.codec`:

- `encode(data)` returns the encoded bytes.
- `decode(data)` returns the decoded bytes from encoded bytes. Any trailing
  bytes that do not make up a whole four-byte character are ignored. The emoji
  prefix bytes are not checked.
- `decode_into(buffer, data)` decodes into a writable buffer and returns the
  number of bytes written. It raises `Base100Error` if the buffer is too small.
- `encoded_len(n)` and `decoded_len(n)` give the output sizes for an input of
  length `n`.

`Base100Error` is a subclass of `ValueError`.

Decoding does not strip line breaks. Remove `\r` and `\n` before decoding.

### Streams

`Encoder` wraps a binary stream that you write to. Data written to it is
encoded and passed on in chunks. `write` returns the number of input bytes
that were written out. If the underlying stream raises `OSError`, that error is
raised again on every later `write`.

`Decoder` is a readable `io.RawIOBase` that wraps a binary stream you read
from. It returns the decoded bytes through `read(size)` or `readinto(buffer)`.
`read()` or `read(-1)` reads to the end. If the stream ends part-way through
an encoded character, the decoder raises `Base100Error`.

```python
import io
from base100.codec import Encoder, Decoder

sink = io.BytesIO()
Encoder(sink).write(b"data")
decoded = Decoder(io.BytesIO(sink.getvalue())).read(-1)
assert decoded == b"data"
```

## Command line

```
base100 [-d] [-i INPUT] [-o OUTPUT]
```

- `-d`, `--decode`: decode the input instead of encoding it
- `-i`, `--input`: input file (standard input by default)
- `-o`, `--output`: output file (standard output by default)
- `-h`, `--help`: show help

```
printf 'hello' | base100 | base100 -d
```

If the input is malformed or an I/O error occurs, the command prints a
`FATAL:` message to standard error and exits with status 1. Encoded output has
no trailing newline. Input passed to `-d` must not contain line breaks.

The same entry point can be called from Python as
`base100.cli.main(argv)`, which returns the exit status.
`base100.cli.run(decode, source, sink)` copies one binary stream to another
and returns the number of raw, unencoded bytes handled.