"""Commands - Write operations that change state.

Commands are immutable dataclasses. Each has a handler in
commands/handlers that returns a Result.
"""

from src.application.commands.member_commands import CreateMember, UpdateMemberName

__all__ = [
    "CreateMember",
    "UpdateMemberName",
]
