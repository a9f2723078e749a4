# -*- coding: ascii -*-
"""
Text Fischer projections of stereocenter configurations.

The backbone runs top to bottom. Each center is drawn with its two arms;
bit 0 puts the hydrogen on the left and the hydroxyl on the right, bit 1
swaps them.

      Fischer projection 01
           |
      H ---C--- OH
           |
     OH ---C--- H
           |
"""

from typing import List

from .configuration import Configuration, canonical_key

CONNECTOR = '       |'

# bit -> (left arm, right arm)
ARMS = {
    0: ('H', 'OH'),
    1: ('OH', 'H'),
}


def center_line(bit: int) -> str:
    left, right = ARMS[bit]
    return f"{left:>3} ---C--- {right}"


def fischer_lines(config: Configuration) -> List[str]:
    """Diagram lines for one configuration, bracketed by blank lines."""
    lines = ['', f"  Fischer projection {canonical_key(config)}"]
    for bit in config.bits:
        lines.append(CONNECTOR)
        lines.append(center_line(bit))
    lines.append(CONNECTOR)
    lines.append('')
    return lines


def render_fischer(config: Configuration) -> str:
    return '\n'.join(fischer_lines(config))
