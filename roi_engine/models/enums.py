from enum import Enum


class Category(str, Enum):
    SALES = "Sprzedaż"
    MARKETING = "Marketing"
    PRODUCT = "Produkt"
    OPERATIONS = "Operacje"
    FINANCE = "Finanse"
    HR = "HR"
    SUPPORT = "Support"
    OTHER = "Inne"


class FrequencyUnit(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class TimeUnit(str, Enum):
    MINUTES = "minutes"
    HOURS = "hours"


class Language(str, Enum):
    PL = "PL"
    EN = "EN"


class Currency(str, Enum):
    PLN = "PLN"
    EUR = "EUR"
    USD = "USD"
