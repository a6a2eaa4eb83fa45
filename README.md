# taurus

A collection of small, independent helpers for everyday Python work:

- `taurus.stringutil` – case conversion (`to_snake_case`, `to_camel_case`,
  `to_upper_first`), `number_to_letters`, `length_of_longest_substring`,
  `validate_uuid` and `validate_email` (both raise `ValueError` on bad input),
  `is_dir`, `file_suffix`, `contains`, `find_index` and `generate_key`.
- `taurus.maputil` – `values_to_strings` renders every value of a mapping as text.
- `taurus.structutil` – `get_fields` lists the field names of a dataclass or
  named tuple.
- `taurus.listnode` – `ListNode` and `add_two_numbers` for numbers stored as
  reversed digit lists.
- `taurus.rand` – `string_with_charset` builds random strings.
- `taurus.geo` – `Point`, `Polygon`, `MultiPoint` and `MultiPolygon` with WKT,
  JSON and GeoJSON encoding and decoding, a `decode` class method for
  `ST_AsText` / `ST_AsGeoJSON` database text, and the `Geometry`, `Feature`
  and `FeatureCollection` containers. Errors derive from
  `taurus.geo.errors.GeoError`, a `ValueError`.
- `taurus.template` – a Jinja2-backed `Template` (`new_template`,
  `parse_files`, `parse_dir`, `parse_glob`, `add_source`, `execute_template`)
  preloaded with string helper functions, plus `FileTemplate` and
  `dir_format`.
- `taurus.tlog` – named loggers (`get`, `debug`, `info`, `warn`, `error`,
  `fatal`, `log_print`, `log_printf`) with coloured console output, and
  `LogWriter` for file output rotated by size or date into gzip backups.
- `taurus.notify.model` – a provider-neutral `Notification`, `Attachment`,
  `Result`, `Format`, `AttachmentKind` and the `Sender` protocol.
- `taurus.rpc` – a gRPC `Manager` that registers services, builds servers and
  keeps named client channels.
- `taurus.rsakeys` – `generate_key` returns a PEM-encoded 1024-bit RSA key pair.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Geometries:

```python
from taurus.geo.point import Point
from taurus.geo.polygon import Polygon

point = Point(120.5, 30.25)
point.wkt()                  # 'POINT(120.5 30.25)'
point.geojson()              # '{"type":"Point","coordinates":[120.5,30.25]}'
Point.from_wkt("POINT(1 2)")

square = Polygon.from_coordinates([[0, 0], [1, 0], [1, 1], [0, 0]])
square.wkt()                 # 'POLYGON((0 0,1 0,1 1,0 0))'
```

Strings:

```python
from taurus.stringutil import to_snake_case, to_camel_case, number_to_letters

to_snake_case("SimpleXMLParser")   # 'simple_xml_parser'
to_camel_case("hello_world")       # 'helloWorld'
number_to_letters(27)              # 'AB'
```

Templates:

```python
from taurus.template.engine import new_template

tmpl = new_template("root").add_source("hello", '{{ stringJoin("he", "llo") }} {{ Name }}')
tmpl.execute_template("hello", {"Name": "world"})   # 'hello world'
```

Logging:

```python
from taurus.tlog.logger import get, Field

logger = get("app").set_caller(False)
logger.set_output_path("logs/app.log", 10, 3, 7)   # 10 MB per file, 3 backups, 7 days
logger.info("started", Field("port", 8080))
```

gRPC:

```python
from taurus.rpc import Manager

manager = Manager()
manager.register_server("svc", my_service)          # any object with register(server)
server = manager.init_server("svc")
port = server.add_port("127.0.0.1:0")
server.start()
manager.register_client("client", f"127.0.0.1:{port}", timeout=5)
channel = manager.get_client("client")
```

RSA keys:

```python
from taurus.rsakeys import generate_key

private_pem, public_pem = generate_key()
```

## What this package does not do

`taurus.notify.model` only describes notifications and the `Sender`
protocol; no sender that delivers messages to a chat or mail service is
included, so you supply your own class with a `send(notification)` method.
There are no command-line tools.