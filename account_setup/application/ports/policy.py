from abc import ABC, abstractmethod


class PolicyPort(ABC):
    @abstractmethod
    def get_policy_text(self) -> str:
        """IAM policy document as pretty-printed JSON text."""
        raise NotImplementedError
