"""Domain models for Kubernetes secret documents."""
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

API_VERSION = "v1"
SECRET_KIND = "Secret"
DEFAULT_TYPE = "Opaque"
DEFAULT_NAMESPACE = "default"


class Status(str, Enum):
    """Outcome of a mutating operation, printable as-is."""

    CREATED = "File created"
    UPDATED = "File updated"
    DELETED = "Key deleted"
    NO_UPDATES = "No updates"


@dataclass
class Metadata:
    """Represents the metadata block of a secret."""
    name: str = ""
    namespace: str = ""


@dataclass
class SecretDocument:
    """A Kubernetes Secret manifest.

    Values in ``data`` are base64 text. Base64 is an encoding, not
    encryption: anyone who can read the file can read the secrets.

    ``pending_update_value`` holds a raw value supplied on the command line
    (or read from a file) and is never written to disk.
    """
    api_version: str = ""
    kind: str = ""
    type: str = ""
    metadata: Metadata = field(default_factory=Metadata)
    data: Dict[str, str] = field(default_factory=dict)
    pending_update_value: Optional[bytes] = field(default=None, repr=False, compare=False)

    @classmethod
    def new(cls, path: str) -> "SecretDocument":
        """Build a fresh Opaque secret named after the file at ``path``.

        The directory and extension are stripped: /tmp/test.yml becomes test.
        """
        name, _ext = os.path.splitext(os.path.basename(path))
        return cls(
            api_version=API_VERSION,
            kind=SECRET_KIND,
            type=DEFAULT_TYPE,
            metadata=Metadata(name=name),
        )

    @property
    def is_secret(self) -> bool:
        return self.kind == SECRET_KIND

    def has_key(self, key: str) -> bool:
        return key in self.data

    def sorted_keys(self) -> list:
        return sorted(self.data)

    def to_dict(self) -> dict:
        """Serializable form, in manifest field order."""
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "type": self.type,
            "metadata": {
                "name": self.metadata.name,
                "namespace": self.metadata.namespace,
            },
            "data": {key: self.data[key] for key in self.sorted_keys()},
        }
