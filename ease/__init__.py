"""ease - artifact list management for multi-module Maven builds.

Goals:
- freeze: record the artifacts a module produced into an artifact list
- aggregate: merge the artifact lists of a dependency tree
- attach: re-attach the artifacts named in a list for install/deploy
- thaw: pull the artifacts listed by selected dependencies into the project
- attachsignatures: attach detached PGP signatures next to attached artifacts
"""

__version__ = "0.3.0"
