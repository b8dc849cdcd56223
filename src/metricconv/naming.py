"""Identifier derivation for generated convention modules.

Names are derived mechanically from dotted convention ids. Within a
namespace's module the ``<namespace>.`` prefix is dropped, so ``cpu.mode``
becomes ``ModeAttr`` in ``cpuconv`` while ``server.port`` keeps its prefix
everywhere.
"""

from __future__ import annotations

import keyword
import re

# Lower-cased word -> spelling used in CapWords identifiers.
INITIALISMS: dict[str, str] = {
    w.lower(): w
    for w in (
        "ACL", "AIX", "AKS", "AMD64", "API", "ARM32", "ARM64", "ARN", "ARNs", "ASCII", "AWS",
        "CPU", "CSS", "DB", "DC", "DNS", "EC2", "ECS", "EDB", "EKS", "EOF", "GCP", "GRPC",
        "GUID", "HPUX", "HSQLDB", "HTML", "HTTP", "HTTPS", "IA64", "ID", "IP", "JDBC", "JSON",
        "K8S", "LHS", "MSSQL", "OS", "PHP", "PID", "PPC32", "PPC64", "QPS", "QUIC", "RAM",
        "RHS", "RPC", "SDK", "SLA", "SMTP", "SPDY", "SQL", "SSH", "TCP", "TLS", "TTL", "UDP",
        "UID", "UI", "UUID", "URI", "URL", "UTF8", "VM", "XML", "XMPP", "XSRF", "XSS", "ZOS",
        "CronJob", "WebEngine", "MySQL", "PostgreSQL", "MariaDB", "MaxDB", "FirstSQL",
        "InstantDB", "HBase", "MongoDB", "CouchDB", "CosmosDB", "DynamoDB", "HanaDB",
        "FreeBSD", "NetBSD", "OpenBSD", "DragonflyBSD", "InProc", "FaaS", "IO", "AI",
    )
}

# Applied to the joined CapWords identifier.
REPLACEMENTS: dict[str, str] = {
    "RedisDatabase": "RedisDB",
    "IPTCP": "TCP",
    "IPUDP": "UDP",
    "Lineno": "LineNumber",
}

_SPLIT_RE = re.compile(r"[._\-\s]+")
_INVALID_RE = re.compile(r"[^0-9A-Za-z_]")


def strip_namespace(attr_id: str, namespace: str) -> str:
    """Drop the ``<namespace>.`` prefix from *attr_id* if present."""
    prefix = namespace + "."
    if attr_id.startswith(prefix):
        return attr_id[len(prefix):]
    return attr_id


def words(name: str) -> list[str]:
    return [w for w in _SPLIT_RE.split(name) if w]


def class_name(name: str) -> str:
    """CapWords identifier for a dotted/underscored *name*.

    >>> class_name("server.request.duration")
    'ServerRequestDuration'
    >>> class_name("client.connection.count")
    'ClientConnectionCount'
    """
    out = "".join(INITIALISMS.get(w.lower(), w[:1].upper() + w[1:]) for w in words(name))
    for cur, repl in REPLACEMENTS.items():
        out = out.replace(cur, repl)
    if out[:1].isdigit():
        out = "V" + out
    return out


def enum_class_name(attr_id: str, namespace: str) -> str:
    return class_name(strip_namespace(attr_id, namespace)) + "Attr"


def snake_name(name: str) -> str:
    """snake_case identifier for *name*, safe to use as a Python name."""
    out = "_".join(w.lower() for w in words(name))
    out = _INVALID_RE.sub("_", out)
    if out[:1].isdigit():
        out = "v_" + out
    if keyword.iskeyword(out):
        out += "_"
    return out


def param_name(attr_id: str, namespace: str) -> str:
    return snake_name(strip_namespace(attr_id, namespace))


def attr_method_name(attr_id: str, namespace: str) -> str:
    return "attr_" + snake_name(strip_namespace(attr_id, namespace)).rstrip("_")


def member_name(member_id: str) -> str:
    """UPPER_SNAKE enum member name for an enum member id.

    Leading underscores are dropped (``_OTHER`` becomes ``OTHER``) and a
    leading digit gets a ``V_`` prefix.
    """
    out = "_".join(w.upper() for w in words(member_id.lstrip("_")))
    out = _INVALID_RE.sub("_", out)
    if not out:
        raise ValueError(f"Cannot derive an enum member name from {member_id!r}")
    if out[0].isdigit():
        out = "V_" + out
    return out


def module_name(namespace: str) -> str:
    """Module name for a namespace: ``gen_ai`` becomes ``genaiconv``."""
    return namespace.replace("_", "").replace("-", "").lower() + "conv"


def package_name(version: str) -> str:
    """Package name for a convention version: ``v1.32.0`` becomes ``v1_32_0``."""
    return "v" + version.lstrip("v").replace(".", "_")
