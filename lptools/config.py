# This file is part of LPTools.
#
# LPTools is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# LPTools is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with LPTools.  If not, see <https://www.gnu.org/licenses/>.

"""
This module contains various configuration variables. They are read at call
time, so they can be modified at any point after importing LPTools.
"""

# Whether to warn when a simplex is built in a dimension where the extra edge
# constraints needed by Minkowski sums cannot be synthesized (dimension >= 4).
warn_unsupported_edge_constraints = True

# Bounding boxes containing more lattice points than this trigger a warning
# before a brute-force enumeration. When set to None, no warning is shown.
enumeration_warning_threshold = 10**8


def set_enumeration_warning_threshold(n):
    """
    **Description:**
    Sets the number of lattice points of a bounding box above which a warning
    is shown before enumerating the points of a polytope.

    **Arguments:**
    - `n` *(int | None)*: The threshold. When set to None, the warning is
      disabled.

    **Returns:**
    Nothing.

    **Example:**
    We disable the warning.
    ```python {2}
    import lptools
    lptools.config.set_enumeration_warning_threshold(None)
    ```
    """
    global enumeration_warning_threshold
    if n is not None and n < 0:
        raise ValueError("The threshold must be non-negative.")
    enumeration_warning_threshold = n
