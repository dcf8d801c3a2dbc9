#weather.py

from enum import Enum
import constants as C

class Weather(Enum):
    RAINING = "raining"
    SUNNY = "sunny"
    WINDY = "windy"
    SNOWING = "snowing"

def random_weighted_weather(rng, categorical=None):
    """
    Draws the weather for the next step.

    By default each threshold gets its own fresh roll, checked in the order
    snow, wind, rain, so the real shares are about 5% / 17% / 26% / 52% rather
    than the 5% / 13% / 16% / 66% the thresholds describe. With `categorical`
    a single roll is compared against the cumulative thresholds instead.
    """
    if categorical is None:
        categorical = C.WEATHER_CATEGORICAL_SAMPLING

    if categorical:
        roll = rng.random()
        if roll < C.WEATHER_SNOW_THRESHOLD:
            return Weather.SNOWING
        elif roll < C.WEATHER_WIND_THRESHOLD:
            return Weather.WINDY
        elif roll < C.WEATHER_RAIN_THRESHOLD:
            return Weather.RAINING
        return Weather.SUNNY

    if rng.random() <= C.WEATHER_SNOW_THRESHOLD:
        return Weather.SNOWING
    elif rng.random() <= C.WEATHER_WIND_THRESHOLD:
        return Weather.WINDY
    elif rng.random() <= C.WEATHER_RAIN_THRESHOLD:
        return Weather.RAINING
    return Weather.SUNNY

def apply_weather(weather, plants, animals, field, rng):
    """Applies one step of the weather's effects to the whole population."""
    if weather is Weather.RAINING:
        _raining(plants, animals, field)
    elif weather is Weather.SUNNY:
        _sunny(plants)
    elif weather is Weather.WINDY:
        _windy(plants, field, rng)
    elif weather is Weather.SNOWING:
        _snowing(plants, animals, field, rng)

def _raining(plants, animals, field):
    # Plants grow more.
    for plant in plants:
        if plant.is_alive:
            plant.grow()
    # Aerial hunters struggle to find food in the rain.
    for animal in animals:
        if animal.is_alive and animal.traits.aerial_hunter:
            animal.increment_hunger(field)

def _sunny(plants):
    for plant in plants:
        if plant.is_alive:
            plant.grow()

def _windy(plants, field, rng):
    for plant in plants:
        if plant.is_alive and rng.random() > plant.wind_survival_probability():
            plant.die(field, "wind")

def _snowing(plants, animals, field, rng):
    for plant in plants:
        if plant.is_alive and rng.random() > plant.snow_survival_probability():
            plant.die(field, "snow")
    for animal in animals:
        if animal.is_alive and rng.random() > animal.snow_survival_probability():
            animal.die(field, "snow")
