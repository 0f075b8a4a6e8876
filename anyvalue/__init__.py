"""Random "any value" generators for test fixtures.

A generated value says the exact value does not matter to the behavior
under test. For example, a person's name is irrelevant to age calculation:

    person = Person(name=random_string(), date_of_birth=ten_years_ago)
    assert person.calculate_age() == 10

Seed the shared source with set_seed(n) to replay a failing run.
"""

from anyvalue.rng import RandomSource, get_source, set_seed, seeded
from anyvalue.generators import (
    DEFAULT_STRING_LENGTH, INT_MIN, INT_MAX,
    random_string, random_string_except,
    random_integer, random_positive_integer, random_boolean,
    random_date, random_datetime,
    random_enum_value, random_enum_value_except,
)
