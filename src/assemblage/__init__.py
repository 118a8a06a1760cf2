"""Assemblage: declarative assembly of dependency-injected systems.

A system is declared as a mapping of unit names to factories, constants or unit
descriptors. Assembling it resolves the order in which units must be built,
instantiates each exactly once, and returns a read-only registry of the results.
Besides direct references to other units, a unit may ask for every contribution
made to an extension slot, allowing plugins to extend a system without the
consumer naming them.

Basic Usage:
    >>> from assemblage.builders import make_system
    >>> from assemblage.descriptors import using_deps
    >>>
    >>> system = make_system({
    ...     "config": {"dsn": "sqlite://"},
    ...     "db": using_deps(["config"], lambda config: Database(config["dsn"])),
    ... })
    >>> system.db

The package consists of several modules:
    - builders: High-level entry points (make_system, make_manifest)
    - descriptors: Declaring dependencies (using_deps, after, contribution_of)
    - extensions: Extension slots and contributions
    - definitions: Normalisation of raw system definitions
    - manifest: Dependency ordering with cycle detection
    - unit_builder: Instantiation of units in order
    - system: The read-only registry of instances
    - domain: Core domain models
    - errors: Framework-specific exceptions
"""
