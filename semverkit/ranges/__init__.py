# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Range compilation and evaluation for semverkit.

Modules
-------
range : module
    Operator enum and the single-constraint Range.
range_list : module
    RangeList, an OR of AND groups, with the pre-release visibility rule.
compiler : module
    compile_range(), which splits, normalizes and tokenizes range text.
normalizers : package
    One normalizer per range syntax plus the dispatch registry.
expression : module
    RangeExpression, a fluent builder for RangeList values.
selection : module
    Helpers that pick satisfying versions out of a candidate list.

Example:
    >>> from semverkit.ranges import compile_range
    >>> compile_range("~1.2.3").is_satisfied_by("1.2.9")
    True
"""

from .compiler import compile_range
from .expression import RangeExpression
from .range import Operator, Range
from .range_list import RangeList
from .selection import filter_satisfying, max_satisfying, min_satisfying

__all__ = [
    "Operator",
    "Range",
    "RangeList",
    "RangeExpression",
    "compile_range",
    "filter_satisfying",
    "max_satisfying",
    "min_satisfying",
]
