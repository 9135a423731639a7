"""Pooled packet buffers, in-memory end points, a system layer and fault injection for a smart-home networking stack."""

__version__ = "0.1.0"

__all__ = [
    "buffer_handle",
    "endpoint",
    "errors",
    "fault_injection",
    "inet_layer",
    "ip_address",
    "packet_buffer",
    "protocols",
    "simple_rand",
    "system_layer",
]