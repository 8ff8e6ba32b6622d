"""
Secret provider interface for ClearTools.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SecretProvider(ABC):
    """Supplies raw string values for named keys."""

    @abstractmethod
    def get_secret(self, key: str) -> Optional[str]:
        """
        Return the raw value stored under key.

        Args:
            key: Key name, possibly a ':'-separated path such as
                'ConnectionStrings:MyDatabase'

        Returns:
            The value, or None if the key is unknown
        """
        pass

    def __contains__(self, key: str) -> bool:
        return self.get_secret(key) is not None
