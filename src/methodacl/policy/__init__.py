from .compiler import compile_entry, compile_policy
from .default import DEFAULT_SECURITY_POLICY

__all__ = ["DEFAULT_SECURITY_POLICY", "compile_entry", "compile_policy"]
