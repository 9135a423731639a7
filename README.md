# chipcore

Building blocks for a smart-home networking stack, in plain Python with no
third-party dependencies.

## Modules

- `chipcore.packet_buffer` – `BufferPool` hands out `PacketBuffer` objects from
  a fixed free list (15 buffers of 256 bytes by default; `default_pool()`
  returns the shared one). A buffer keeps a reserved header area in front of
  its payload and supports chaining (`add_to_end`), reference counting
  (`add_ref`, `free`), dropping data from the front (`consume_head`,
  `consume`), moving the payload start (`set_start`) and growing the header
  area (`ensure_reserved_size`). `align_size(value, alignment)` rounds up to a
  power-of-two alignment.
- `chipcore.buffer_handle` – `PacketBufferHandle` owns one reference to the head
  of a buffer chain. `new`, `new_with_default_header` and `new_with_data`
  return `None` when the sizes are too large or the pool is empty. The handle
  offers `retain`, `pop_head`, `free_head`, `add_to_end`, `release`,
  `consume`, `advance`, `clone` (a deep copy into new buffers) and `free`, and
  frees itself at the end of a `with` block.
- `chipcore.system_layer` – `SystemLayer` with `init`, `shutdown` and
  `is_initialized`; `init` raises `IncorrectStateError` if the layer is
  already up. `system_layer()` returns the process-wide instance.
- `chipcore.inet_layer` – `EndPointManager`, a pool of end points of fixed
  capacity built by a factory. It must be `init`-ed with an initialised system
  layer; `new_end_point` raises `EndPointPoolFullError` when no slot is left.
  `for_each_end_point` calls a function on each live end point until it
  returns `Loop.BREAK`, and reports `Loop.BREAK` or `Loop.FINISH`.
- `chipcore.endpoint` – `EndPoint`, an in-memory end point that binds,
  listens, sends through a handler set with `set_send_handler`, and passes
  inbound messages given to `deliver` to its receive callback (or reports
  `InboundMessageTooBigError` to its error callback when it has none). It is
  reference counted and leaves its manager when the last reference is
  released. `create_manager()` builds an uninitialised manager for it.
- `chipcore.ip_address` – `IPAddress` (four 32-bit words, with `ANY` and
  `ANY_IPV4`), `IPAddressType`, `IPPacketInfo`, `InterfaceId` and
  `InterfaceType`.
- `chipcore.fault_injection` – `FaultManager` with `fail_at_fault`,
  `check_fault`, `times_checked` and `reset`; `InetFault` names the bind,
  listen and send points, and `get_manager()` returns the shared manager that
  `EndPoint` consults.
- `chipcore.protocols` – `VendorId`, `ProtocolId` and the standard protocol
  identifiers (`SECURE_CHANNEL`, `INTERACTION_MODEL`, `BDX`,
  `USER_DIRECTED_COMMISSIONING`, `ECHO`, `NOT_SPECIFIED`).
- `chipcore.simple_rand` – `SimpleRng`, a deterministic xorshift generator for
  tests; it is not suitable for cryptography.
- `chipcore.errors` – `ChipError` and its subclasses.

## Example

```python
from chipcore.buffer_handle import PacketBufferHandle
from chipcore.endpoint import create_manager
from chipcore.ip_address import IPAddress, IPAddressType, IPPacketInfo
from chipcore.system_layer import system_layer

layer = system_layer()
layer.init()

manager = create_manager()
manager.init(layer)

received = []

def on_message(end_point, msg, pkt_info):
    received.append((pkt_info.src_port, msg.buffer().data()))
    msg.free()

ep = manager.new_end_point()
ep.bind(IPAddressType.ANY, IPAddress.ANY, 888, None)
ep.listen(on_message, None, None)

info = IPPacketInfo(src_port=666, dest_port=888)
ep.deliver(info, PacketBufferHandle.new_with_data(b"\x01\x02\x03", 0, 0, None))
# received == [(666, b"\x01\x02\x03")]
```

Errors are raised as subclasses of `ChipError`, for example
`WrongAddressTypeError` when binding to an address of the wrong type, or
`EndPointPoolFullError` when the manager has no room left.

## What this package does not do

There is no real network I/O: end points never open sockets, and messages move
only through `deliver` and the send handler. There is no command-line tool and
no persistent storage.

## Tests

The test suite in `tests/` runs under pytest, which the `test` extra installs.