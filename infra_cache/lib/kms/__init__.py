from .key import KeyReference
