import pytest

from sphinx2md.types import ApiMetadata, ImageRef, SphinxToMdResult


@pytest.fixture
def class_result():
    """A converted class page with API metadata."""
    return SphinxToMdResult(
        markdown="Body.",
        meta=ApiMetadata(
            python_api_name="qiskit.circuit.QuantumCircuit",
            python_api_type="class",
        ),
    )


@pytest.fixture
def plain_result():
    """A converted page with no API metadata (e.g. an index page)."""
    return SphinxToMdResult(markdown="No API here.")


@pytest.fixture
def result_with_images():
    """A function page carrying images and extra metadata."""
    return SphinxToMdResult(
        markdown="# transpile\n\n![circuit](/images/api/circuit.png)",
        meta=ApiMetadata(
            python_api_name="qiskit.compiler.transpile",
            python_api_type="function",
            source_url="https://example.com/qiskit/compiler.py",
        ),
        images=[
            ImageRef(
                file_name="circuit.png",
                src="_images/circuit.png",
                dest="/images/api/circuit.png",
            )
        ],
    )
