"""A small class hierarchy whose subclass shadows a method."""


class Animal:
    """A generic animal."""

    def sound(self) -> str:
        """The generic sound."""
        return "Animal"


class Dog(Animal):
    """A dog, with its own sound."""

    def sound(self) -> str:
        """The dog's sound."""
        return "Dog"