# netlab

A collection of small networking exercises. Each one is a module you can
import and a console command you can run:

| Module                 | Command              | What it does                                               |
|------------------------|----------------------|------------------------------------------------------------|
| `netlab.distvector`    | `netlab-distvector`  | Builds routing tables from a cost matrix (distance vector) |
| `netlab.leakybucket`   | `netlab-leakybucket` | Simulates a leaky-bucket traffic shaper                    |
| `netlab.reversal`      | `netlab-reversal`    | String reversal service over TCP or UDP                    |
| `netlab.matrix`        | `netlab-matrix`      | Matrix multiplication service over TCP or UDP              |
| `netlab.timesvc`       | `netlab-time`        | UDP time server and client                                 |
| `netlab.filetransfer`  | `netlab-ftp`         | Sends a named file from server to client over TCP          |
| `netlab.echo`          | `netlab-echo`        | Multi-client TCP echo server and chat client               |
| `netlab.stopwait`      | `netlab-stopwait`    | Stop-and-wait protocol over UDP                            |

It uses only the standard library and runs on Python 3.10 and later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

The computational parts can be called directly:

```python
from netlab.reversal import reverse_text
from netlab.matrix import multiply
from netlab.leakybucket import average_rate

reverse_text("hello")                         # "olleh"
multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])  # [[19, 22], [43, 50]]
average_rate([4, 6, 8])                       # 6
```

- `netlab.distvector`: `parse_cost_matrix(n, values)` builds an n-by-n matrix
  from the off-diagonal costs in row order (`-1` means no link, stored as
  `UNREACHABLE`, 9999; at most 20 nodes). `compute_routes` returns a `Route`
  (`destination`, `distance`, `via`, all numbered from 0) for every pair of
  nodes, and `format_routes` renders the final routing table.
- `netlab.leakybucket`: `simulate(bucket_size, packets)` returns a list of
  `BucketStep` records, one per packet, with the amount dropped, the bucket
  level on arrival and the level after draining at the average rate.
  `format_report` produces the full printed report.
- `netlab.matrix`: besides `multiply`, `encode_dimensions`/`decode_dimensions`
  and `encode_matrix`/`decode_matrix` convert to and from the wire format
  (little-endian 32-bit integers, matrices padded to 10 by 10). Matrices are
  limited to 10 rows and 10 columns.
- `netlab.timesvc`: `encode_time`/`decode_time` pack a Unix timestamp as a
  signed 64-bit integer; `handle_request` returns the reply for a `TIME`
  request and `None` for anything else.
- `netlab.stopwait`: a `Frame` (kind from `FrameKind`: `ACK`, `SEQ`, `FIN`)
  packs to and unpacks from bytes; a `Sender` numbers outgoing frames and
  checks acknowledgements; a `Receiver` acknowledges frames arriving in
  sequence.

The network functions take ready sockets or addresses:

- clients: `reversal.request_tcp` / `request_udp`, `matrix.request_tcp` /
  `request_udp`, `timesvc.request_time`, `filetransfer.fetch`, `echo.chat`,
  `stopwait.send_messages`;
- servers: `reversal.serve_tcp_once` / `serve_udp_once`,
  `matrix.serve_tcp_once` / `serve_udp_once`, `timesvc.serve`,
  `filetransfer.serve_once` (raises `TransferError` when the file cannot be
  opened, after telling the client), `echo.serve` with `echo.handle_client`,
  and `stopwait.serve`.

## Running the commands

The two local exercises read their numbers from standard input:

```
netlab-distvector     # node count, then the off-diagonal costs row by row
netlab-leakybucket    # bucket size, number of packets, then the packet sizes
```

The network exercises have a server and a client role; start the server in
one terminal and the client in another:

```
netlab-reversal tcp-server 9000          # or udp-server
netlab-reversal tcp-client 9000 hello    # or udp-client; prompts if no text

netlab-matrix tcp-server 9001            # or udp-server
netlab-matrix tcp-client 9001            # reads dimensions and values from stdin

netlab-time server [--port 8080]
netlab-time client [--port 8080] [--host 127.0.0.1]

netlab-ftp server 9002
netlab-ftp client 9002 [name] [destination]   # prompts for missing names

netlab-echo server [--port 6666]
netlab-echo client [--port 6666] [--host 127.0.0.1]

netlab-stopwait server [--port 6666] [--host 127.0.0.1]
netlab-stopwait client [messages ...] [--port 6666] [--host 127.0.0.1]
```

Servers listen on all interfaces except the stop-and-wait server, which binds
to `--host`. Clients that take no `--host` option connect to 127.0.0.1.

## What it does not do

- The reversal, matrix and file-transfer servers answer a single request and
  then exit; only the time, echo and stop-and-wait servers keep running until
  interrupted.
- The file-transfer service sends a file the server can open by the name the
  client gives; there is no directory listing, upload or authentication.
- The stop-and-wait client does not retransmit: it stops at the first frame
  whose acknowledgement is missing or wrong.