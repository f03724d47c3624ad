"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by sht_colour.registry.discover().

The explicit imports below keep the modules visible to frozen builds, where
pkgutil.iter_modules cannot list the package.
"""

# Hidden imports for frozen builds: keep this list in sync with command modules
import sht_colour.commands.parse as _parse  # noqa: F401
import sht_colour.commands.ramp as _ramp  # noqa: F401
import sht_colour.commands.to_rgb as _to_rgb  # noqa: F401
import sht_colour.commands.to_sht as _to_sht  # noqa: F401
