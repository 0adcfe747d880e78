"""Base unit system foundation for typed physical quantities.

This module provides the fundamental Unit class that serves as the abstract
base for all unit types in the library. It implements the unit family system
using automatic ROOT class assignment, which enables type-safe operations
between compatible units while preventing mixing of incompatible physical
quantities such as distances and speeds.

Each family also owns an alias table mapping the abbreviations a human may
write ("km", "NM", "kn") to the unit class that understands them. The table
is filled in automatically as unit classes are defined, so the parser never
needs a hand-maintained switch per family.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the canonical unit of each family
- ALIASES: Tokens registered in the family alias table for parsing
- Type Safety: Operations are restricted to compatible unit families

Classes:
    Unit: Abstract base class for all unit types with family management.

Example:
    >>> class Metre(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for distance units
    ...     ALIASES = ("m",)
    >>> class Kilometre(Metre):
    ...     ALIASES = ("km",)  # Automatically gets ROOT = Metre
    >>> Metre.lookup("km") is Kilometre
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    All concrete unit classes should inherit from UnitFloat rather than
    directly from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit abbreviation for display purposes.
        NAME (ClassVar[str]): Human readable unit name.
        ALIASES (ClassVar[tuple[str, ...]]): Tokens accepted by the parser.
        UNIT_CHARS (ClassVar[str]): Non-letter characters that may appear in
            a unit token written directly after a numeral.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    NAME: ClassVar[str] = ""
    ALIASES: ClassVar[tuple[str, ...]] = ()
    UNIT_CHARS: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    _registry: ClassVar[dict[str, type[Unit]]]

    def __init_subclass__(cls, **kwargs):
        """Set the ROOT class for subclasses and register their aliases.

        The ROOT class is the first ancestor with IS_FAMILY_ROOT=True, or the
        class itself if none is found. Aliases declared directly on the class
        are added to the alias table of its family.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.

        Raises:
            ValueError: If an alias is already registered in the same family.
        """
        super().__init_subclass__(**kwargs)
        cls._assign_root()

        if cls.ROOT is cls:
            cls._registry = {}

        aliases = cls.__dict__.get("ALIASES", ())
        for alias in aliases:
            owner = cls.ROOT._registry.get(alias)
            if owner is not None:
                msg = f"alias {alias!r} of {cls.__name__} is already used by {owner.__name__}"
                raise ValueError(msg)
        if len(set(aliases)) != len(aliases):
            msg = f"{cls.__name__} lists an alias more than once: {aliases!r}"
            raise ValueError(msg)

        # register only once every alias is known to be free
        for alias in aliases:
            cls.ROOT._registry[alias] = cls

    @classmethod
    def _assign_root(cls):
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def lookup(cls, alias: str) -> type[Unit] | None:
        """Return the unit class registered for an alias in this family.

        Matching is exact and case-sensitive.

        Args:
            alias: Unit token as written by a human, e.g. "km".

        Returns:
            type[Unit] | None: The matching unit class, or None if unknown.
        """
        return cls.ROOT._registry.get(alias)

    @classmethod
    def aliases(cls) -> tuple[str, ...]:
        """Return every alias registered in this family."""
        return tuple(cls.ROOT._registry)

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Check if two unit types belong to the same physical quantity family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the other type is not a unit, or the units belong
                to different physical quantity families.
        """
        if not (isinstance(unit_type, type) and issubclass(unit_type, Unit)):
            msg = f"expected a unit of {cls.ROOT.__name__}, got {unit_type.__name__}"
            raise TypeError(msg)
        if cls.ROOT is not unit_type.ROOT:
            msg = f"incompatible units: {cls.ROOT.__name__} and {unit_type.ROOT.__name__}"
            raise TypeError(msg)
