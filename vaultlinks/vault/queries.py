"""Compiled tree-sitter queries shared by every document."""

from dataclasses import dataclass
from functools import lru_cache

from tree_sitter import Language, Query, QueryError

from ..errors import RegistryError
from .parser import INLINE_LANGUAGE, YAML_LANGUAGE

# Any inline node with a text, a destination, or both:
# [[Foo]], [[Foo|Bar]], [label](dest), ![alt](src), [label][ref]
# A node matched by both alternatives is merged back into one link.
LINK_QUERY = """
[
  (_ (link_text) @text . (link_destination)? @destination)
  (_ (link_destination) @destination)
]
"""

# aliases:
#   - First
#   - Second
ALIAS_QUERY = """
(block_mapping_pair
  key: ((flow_node) @key (#match? @key "(?i)aliases"))
  value: (block_node
    (block_sequence
      (block_sequence_item
        (flow_node
          (plain_scalar
            (string_scalar)+ @alias))))))
"""

# Any "double quoted" value, whatever key it sits under
QUOTED_SCALAR_QUERY = "(double_quote_scalar) @scalar"


@dataclass(frozen=True)
class QueryRegistry:
    """The three queries used for extraction.

    Queries are read-only once compiled; callers run them through their own
    ``QueryCursor`` so one registry can serve every worker thread.
    """

    links: Query  # markdown inline grammar
    aliases: Query  # YAML grammar
    quoted_scalars: Query  # YAML grammar

    @classmethod
    def compile(cls) -> "QueryRegistry":
        """Compile all queries.

        Raises:
            RegistryError: If any query is rejected by its grammar.
        """
        return cls(
            links=compile_query(INLINE_LANGUAGE, LINK_QUERY, "link"),
            aliases=compile_query(YAML_LANGUAGE, ALIAS_QUERY, "alias"),
            quoted_scalars=compile_query(YAML_LANGUAGE, QUOTED_SCALAR_QUERY, "quoted scalar"),
        )


def compile_query(language: Language, source: str, name: str) -> Query:
    try:
        return Query(language, source)
    except QueryError as e:
        raise RegistryError(f"Failed to compile {name} query: {e}") from e


@lru_cache(maxsize=1)
def get_registry() -> QueryRegistry:
    """Process-wide registry, compiled on first use."""
    return QueryRegistry.compile()
