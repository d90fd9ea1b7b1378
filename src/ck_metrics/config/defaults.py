"""Default namespaces and naming conventions used by the metrics engine."""

# Packages treated as the Java platform (standard library)
PLATFORM_PREFIXES = (
    "java.",
    "javax.",
    "org.omg.",
    "org.w3c.dom.",
    "org.xml.sax.",
)

# Descriptor-encoded names (annotation types) that are artifacts of the
# class-file encoding rather than source-level couplings
DESCRIPTOR_ARTIFACT_PREFIXES = (
    "Ljavax/",
    "Ljava/",
    "Lcom/",
)

# Dependency-injection framework marker (Spring), counted toward DICBO
DI_FRAMEWORK_MARKER = "springframework"
DI_FRAMEWORK_ROOTS = ("Lorg", "org.")

# Names the compiler leaves where a class name is expected when it
# expands a lambda into a functional-interface call
LAMBDA_DISPATCHER_NAMES = frozenset({"accept", "test", "apply"})

# Prefix of compiler-synthesized lambda body methods
LAMBDA_METHOD_PREFIX = "lambda$"

CONSTRUCTOR_NAME = "<init>"

# Primitive and void type names never denote a coupled class
PRIMITIVE_TYPES = frozenset(
    {"boolean", "byte", "char", "short", "int", "long", "float", "double", "void"}
)

# Number of lock stripes guarding registry records
DEFAULT_LOCK_STRIPES = 64

# Environment overrides
ENV_INCLUDE_PLATFORM = "CK_METRICS_INCLUDE_PLATFORM"
ENV_WORKERS = "CK_METRICS_WORKERS"
