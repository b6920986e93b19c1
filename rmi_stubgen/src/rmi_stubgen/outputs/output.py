import json

from rmi_stubgen.models.stub_models import RemoteClass


# --- Pretty printing & JSON export ------------------------------------------

def signature(method) -> str:
    params = ", ".join(f"{p.type} {p.name}" for p in method.parameters)
    throws = f" throws {', '.join(method.exceptions)}" if method.exceptions else ""
    return f"{method.return_type} {method.name}({params}){throws}"


def print_summary(classes: list[RemoteClass]):
    """
    Human-friendly printout of the remote classes found.
    """
    print("\n=== PACKAGES ===")
    for p in sorted({c.package_name for c in classes}):
        print(" -", p or "<default>")

    print("\n=== REMOTE CLASSES & METHODS ===")
    for rc in sorted(classes, key=lambda c: c.qualified_name):
        print(f"\n[{rc.qualified_name}]")
        for m in rc.methods:
            print(f"  - {signature(m)}")


def to_json(classes: list[RemoteClass]) -> str:
    """
    Serializes the stub models to JSON.
    """
    out = {
        "classes": [
            {
                "qualifiedName": rc.qualified_name,
                "packageName": rc.package_name,
                "className": rc.class_name,
                "methods": [
                    {
                        "name": m.name,
                        "returnType": m.return_type,
                        "parameters": [{"type": p.type, "name": p.name} for p in m.parameters],
                        "exceptions": list(m.exceptions),
                    }
                    for m in rc.methods
                ],
            }
            for rc in classes
        ]
    }
    return json.dumps(out, indent=2)
