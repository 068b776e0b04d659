"""
Constants
"""

# Ignore pylint warnings
# pylint: disable = line-too-long


class Constants:
    """
    Constants configurations
    """

    POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
    POKEAPI_GRAPHQL_URL = "https://beta.pokeapi.co/graphql/v1beta"

    USER_AGENT = "rotom-fetch/1.0 (pokemon-summary-cli)"
    REQUEST_TIMEOUT = 30

    HP_STAT_NAME = "hp"
    SUMMARY_TEMPLATE = "{name} (#{pokemon_id}) has {hp} HP."

    BACKENDS = ("rest", "graphql")
    DEFAULT_BACKEND = "rest"

    GRAPHQL_POKEMON_QUERY = """
query pokemonSummary($name: String!) {
  pokemon_v2_pokemon(where: {name: {_eq: $name}}, limit: 1) {
    id
    name
    pokemon_v2_pokemonstats(where: {pokemon_v2_stat: {name: {_eq: "hp"}}}) {
      base_stat
    }
  }
}
""".strip()
