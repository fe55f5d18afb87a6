"""Domain enumerations."""

from enum import Enum, auto


class AnnotationKind(Enum):
    """Recognized annotation markers.

    Unrecognized annotations are kept with OTHER, never dropped.
    """

    # Stereotypes (class is a bean)
    COMPONENT = auto()
    SERVICE = auto()
    REPOSITORY = auto()
    CONTROLLER = auto()
    REST_CONTROLLER = auto()
    CONFIGURATION = auto()

    # Bean production and injection
    BEAN = auto()  # factory method
    AUTOWIRED = auto()  # @Autowired, @Inject
    QUALIFIER = auto()
    PRIMARY = auto()

    # Lombok constructor generation
    REQUIRED_ARGS_CONSTRUCTOR = auto()
    ALL_ARGS_CONSTRUCTOR = auto()
    NON_NULL = auto()

    OTHER = auto()

    @property
    def is_stereotype(self) -> bool:
        """True for class-level component annotations."""
        return self in _STEREOTYPES

    @property
    def is_injection_marker(self) -> bool:
        """True for the field/constructor/setter injection marker."""
        return self is AnnotationKind.AUTOWIRED


_STEREOTYPES = frozenset(
    {
        AnnotationKind.COMPONENT,
        AnnotationKind.SERVICE,
        AnnotationKind.REPOSITORY,
        AnnotationKind.CONTROLLER,
        AnnotationKind.REST_CONTROLLER,
        AnnotationKind.CONFIGURATION,
    }
)


class Visibility(Enum):
    """Member visibility by access modifier."""

    PUBLIC = auto()
    PROTECTED = auto()
    PRIVATE = auto()
    PACKAGE = auto()  # no modifier


class DefinitionKind(Enum):
    """Where a bean definition comes from."""

    CLASS = auto()  # stereotype-annotated class
    METHOD = auto()  # @Bean factory method


class InjectionKind(Enum):
    """Injection mechanism of an injection point."""

    FIELD = auto()
    CONSTRUCTOR = auto()
    SETTER = auto()
    LOMBOK_CONSTRUCTOR = auto()  # generated by @RequiredArgsConstructor / @AllArgsConstructor
    BEAN_METHOD = auto()  # parameter of a @Bean method


class MemberKind(Enum):
    """Closed set of class-body declaration kinds."""

    FIELD = auto()
    METHOD = auto()
    CONSTRUCTOR = auto()
    OTHER = auto()  # initializer blocks, nested types, statements
