from enum import Enum

class DrinkType(str, Enum):
    BEER = "Beer"
    WINE = "Wine"
    WHISKEY = "Whiskey"
    VODKA = "Vodka"
    RUM = "Rum"
    TEQUILA = "Tequila"
    GIN = "Gin"
    SCOTCH = "Scotch"
    BRANDY = "Brandy"
    COGNAC = "Cognac"
    NON_ALC = "Non-Alc"
