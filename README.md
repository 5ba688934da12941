# uds

Core pieces of a relay that keeps upstream and downstream traffic on
separate connections: an in-memory stream and a binary reader for framing
data, file helpers, an INI parser, a typed application configuration
model, a seedable pseudo-random generator, and the password-keyed AES
cipher used by the `encryptor` transport.

## Installation

```
pip install .
```

Run the test suite with:

```
pip install .[test]
pytest
```

## Streams (`uds.stream`, `uds.binary_reader`)

```python
from uds.stream import MemoryStream, SeekOrigin
from uds.binary_reader import BinaryReader

stream = MemoryStream()
stream.write(b"\x01\x00\x02\x00\x00\x00")
stream.seek(0, SeekOrigin.BEGIN)

reader = BinaryReader(stream)
reader.read_int16()   # 1
reader.read_int32()   # 2
```

`MemoryStream` grows on demand (at least 256 bytes, doubling after that).
One built over an existing `buffer` shares it and cannot grow beyond its
size. `read(count)` returns fewer bytes at the end of the data and
`read_byte()` returns `-1` there. Seeking outside the data, negative
lengths or counts, and any use after `close()` raise `ValueError`.
`to_bytes()` copies the data; `get_buffer()` returns the underlying
buffer, which may be longer. Streams work as context managers.

`BinaryReader` reads little-endian values: `read_int16`, `read_int32`,
`read_int64`, their unsigned forms, `read_sbyte`, `read_byte`,
`read_single`, `read_double`, `read_boolean` and `read_char`.
`read_bytes(count)` and every typed read raise `EOFError` when a whole
value is not available.

## INI files (`uds.ini`)

```python
from uds.ini import Ini

ini = Ini.load_from("[server]\nport = 7000\nhost: 0.0.0.0\n")
ini["server"].get_int("port")     # 7000
ini["server"]["host"]             # "0.0.0.0"
str(ini)                          # "[server]\r\nhost=0.0.0.0\r\nport=7000"
```

Sections and keys are iterated in sorted order. `#` starts a comment, a
key may be separated from its value by `=` or `:`, and lines before the
first section are ignored. `Ini[name]` adds the section when missing;
`get` returns `None` instead. `Section.get_value` returns `""` for a
missing key, while `Section[key]` raises `KeyError`. `get_int` and
`get_float` read the leading number of a value, or give `0`.
`Ini.load_file(path)` returns an empty document when the file cannot be
read.

## Files (`uds.file`)

`exists`, `can_access` (with `FileAccess.READ`, `FileAccess.WRITE`,
`FileAccess.READ_WRITE`), `get_length`, `read_all_bytes` and
`write_all_bytes`. `get_length` and `read_all_bytes` raise `OSError` when
the file cannot be opened. `get_encoding(data)` spots a leading mark and
returns an `Encoding` together with the number of bytes to skip.

## Configuration (`uds.configuration`)

`AppConfiguration` is a dataclass holding the loopback mode
(`LoopbackMode.CLIENT` or `LoopbackMode.SERVER`), the listening address,
the `inbound` and `outbound` endpoints (`EndpointConfiguration`), the
`connect` and `handshake` timeouts in seconds (10 and 5 by default), the
backlog (511), the `ProtocolType` and the per-protocol settings in
`protocols`: `SslConfiguration`, `WebSocketConfiguration` and
`EncryptorConfiguration`. `SslConfiguration.reset()` restores its
defaults.

## Random numbers (`uds.random`)

`Random` is a subtractive generator: the same seed always gives the same
sequence. Without a seed it starts from a clock reading.

```python
from uds.random import Random

rng = Random(42)
rng.next()               # 0 <= n < 2**31 - 1
rng.next_range(10, 20)   # 10 <= n < 20
rng.next_double()        # between 0.0 and 1.0
```

## Encryption (`uds.encryptor`)

```python
from uds.encryptor import Encryptor

password = "password"
cipher = Encryptor("aes-256-cfb", password)
sealed = cipher.encrypt(b"hello")
cipher.decrypt(sealed)   # b"hello"
```

Supported methods are `aes-128`, `aes-192` and `aes-256` with `-cfb`,
`-cfb8`, `-ofb`, `-ctr`, `-cbc` or `-ecb`, and the aliases `aes128`,
`aes192`, `aes256` for CBC; names are case-insensitive and an unknown one
raises `ValueError`. `Encryptor.support(method)` tells whether a name is
known. Every call starts the cipher afresh with the same key and IV. No
padding is added: CBC and ECB encryption returns only complete blocks,
and their decryption holds back the final block.

The key and IV are derived from the password with MD5, no salt and one
round; `evp_bytes_to_key(password, key_length, iv_length)` exposes that
derivation.

## What this package does not do

It has no command, no listener and no client or server that relays
traffic, and no SSL, WebSocket or plain TCP transports. Nothing here
turns an INI document into an `AppConfiguration`; fill its fields from an
`Ini` yourself.