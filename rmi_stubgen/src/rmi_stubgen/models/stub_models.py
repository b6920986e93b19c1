# --- Stub models handed to the script serializer -----------------------------
from dataclasses import dataclass, field

from rmi_stubgen.models.ast_models import Parameter


@dataclass
class RemoteMethod:
    """Signature of one remote method: name, return type, parameters and declared exceptions."""
    name: str
    return_type: str = "void"
    parameters: list[Parameter] = field(default_factory=list)
    exceptions: list[str] = field(default_factory=list)  # declaration order, no duplicates

    def add_parameter(self, type_: str, name: str):
        self.parameters.append(Parameter(type_, name))

    def add_exception_type(self, exception_type: str):
        if exception_type not in self.exceptions:
            self.exceptions.append(exception_type)

    @property
    def parameter_names(self) -> list[str]:
        return [p.name for p in self.parameters]


@dataclass
class RemoteClass:
    """A remote class and its remote methods, in declaration order."""
    qualified_name: str
    methods: list[RemoteMethod] = field(default_factory=list)

    @property
    def class_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def package_name(self) -> str:
        pkg, sep, _ = self.qualified_name.rpartition(".")
        return pkg if sep else ""

    def create_method(self, name: str) -> RemoteMethod:
        """Returns an empty method; it joins the class only through add_method."""
        return RemoteMethod(name=name)

    def add_method(self, method: RemoteMethod):
        self.methods.append(method)

    def has_methods(self) -> bool:
        return bool(self.methods)

    def method_names(self) -> list[str]:
        return [m.name for m in self.methods]
