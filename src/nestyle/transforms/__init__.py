from nestyle.transforms.flatten import (
    flatten,
    flatten_all,
    join_pairs,
    pair_contents,
    render_rule,
    render_rules,
)
from nestyle.transforms.folding import compress_contents

__all__ = [
    "flatten",
    "flatten_all",
    "pair_contents",
    "join_pairs",
    "render_rule",
    "render_rules",
    "compress_contents",
]
