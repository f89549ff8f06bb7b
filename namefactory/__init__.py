from namefactory.factory import \
    NameFactory, SimpleNameFactory, NumericNameFactory, PrefixingNameFactory
from namefactory.alphabet import \
    Alphabet, DEFAULT_ALPHABET, extract_alphabet, encode, is_eligible
from namefactory.source import \
    DictionaryError, open_source
from namefactory.dictionary import \
    DictionaryNameFactory
