"""
Unit tests for RDF parsing and registry population.
"""

import pytest
from rdflib import OWL, RDFS, URIRef, XSD

from owlgraph.formats.rdf import OntologyLoader, RDFGraphParser
from owlgraph.registry import EntityNotFoundError, EntityRegistry
from owlgraph.shared.models import TypeOfProperty


def load(content: str) -> OntologyLoader:
    graph, _ = RDFGraphParser.parse_content(content)
    loader = OntologyLoader(EntityRegistry())
    loader.load(graph)
    return loader


@pytest.mark.unit
class TestRDFGraphParser:
    """Parsing and error translation."""

    def test_parse_simple_content(self, simple_ttl):
        """Valid Turtle yields a graph and its triple count."""
        graph, triple_count = RDFGraphParser.parse_content(simple_ttl)

        assert triple_count == len(graph)
        assert triple_count > 0

    def test_empty_content(self):
        """Empty input is rejected before parsing."""
        with pytest.raises(ValueError, match="Empty RDF content"):
            RDFGraphParser.parse_content("   ")

    def test_invalid_syntax(self):
        """rdflib failures surface as ValueError."""
        with pytest.raises(ValueError, match="Invalid RDF syntax"):
            RDFGraphParser.parse_content("@prefix : <invalid syntax")

    def test_no_triples(self):
        """Prefix-only documents hold nothing to convert."""
        with pytest.raises(ValueError, match="No RDF triples"):
            RDFGraphParser.parse_content("@prefix : <http://example.org/> .")

    def test_missing_file(self, tmp_path):
        """A nonexistent path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            RDFGraphParser.parse_file(str(tmp_path / "missing.ttl"))

    def test_parse_file(self, temp_ttl_file):
        """Files are parsed with the format inferred from their extension."""
        graph, triple_count = RDFGraphParser.parse_file(temp_ttl_file)

        assert triple_count == len(graph) > 0

    @pytest.mark.parametrize("path,expected", [
        ("onto.ttl", "turtle"),
        ("onto.OWL", "xml"),
        ("onto.rdf", "xml"),
        ("onto.jsonld", "json-ld"),
        ("onto.nt", "nt"),
        ("onto.unknown", "turtle"),
    ])
    def test_infer_format(self, path, expected):
        """Extensions map to rdflib parser names."""
        assert RDFGraphParser.infer_format_from_path(path) == expected


@pytest.mark.unit
class TestOntologyLoader:
    """Registry contents after loading."""

    def test_simple_ontology(self, simple_ttl, iri):
        """Classes, datatypes and properties land in their tables."""
        registry = load(simple_ttl).registry

        assert set(registry.get_class_map()) == {iri("Person"), iri("Organization")}
        assert set(registry.get_datatype_map()) == {XSD.string, XSD.integer}
        assert set(registry.get_object_property_map()) == {iri("worksFor")}
        assert set(registry.get_datatype_property_map()) == {iri("name"), iri("age")}
        assert len(registry.get_properties()) == 3

    def test_property_endpoints(self, simple_ttl, iri):
        """Domains and ranges are recorded as IRIs."""
        registry = load(simple_ttl).registry

        works_for = registry.get_object_property_for_iri(iri("worksFor"))
        assert works_for.domains == [iri("Person")]
        assert works_for.ranges == [iri("Organization")]
        assert registry.get_datatype_property_for_iri(iri("age")).ranges == [XSD.integer]

    def test_annotations_and_languages(self, simple_ttl, iri):
        """Labels keep their language tags; tags are collected."""
        registry = load(simple_ttl).registry

        person = registry.get_class_for_iri(iri("Person"))
        assert person.labels == {"en": "Person", "de": "Person"}
        assert person.comments == {"en": "A human being"}
        assert registry.get_languages() == frozenset({"en", "de"})

    def test_ontology_header(self, simple_ttl):
        """The ontology IRI and title are captured."""
        loader = load(simple_ttl)

        assert loader.ontology_iri == URIRef("http://example.org/ontology")
        assert loader.title == {"en": "Example Ontology"}

    def test_untagged_label(self, minimal_ttl, iri):
        """Untagged literals use the undefined key."""
        registry = load(minimal_ttl).registry

        assert registry.get_class_for_iri(iri("Person")).labels == {"undefined": "Person"}
        assert registry.get_languages() == frozenset()

    def test_inheritance(self, inheritance_ttl, iri):
        """Super classes are recorded and undeclared parents become external classes."""
        registry = load(inheritance_ttl).registry

        dog = registry.get_class_for_iri(iri("Dog"))
        assert dog.super_classes == [iri("Mammal"), iri("Pet")]
        assert registry.get_class_for_iri(iri("Pet")).external is True
        assert registry.get_class_for_iri(iri("Mammal")).external is False

    def test_individuals_and_type_of(self, individuals_ttl, iri):
        """Named individuals stay out of the unified table; punning becomes rdf:type edges."""
        registry = load(individuals_ttl).registry

        rex = registry.get_individual_for_iri(iri("rex"))
        assert rex.types == [iri("Dog")]
        with pytest.raises(EntityNotFoundError):
            registry.get_entity_for_iri(iri("rex"))

        type_of_properties = list(registry.get_type_of_property_map().values())
        assert len(type_of_properties) == 1
        type_of = type_of_properties[0]
        assert isinstance(type_of, TypeOfProperty)
        assert str(type_of.iri).startswith("http://owl2vowl.de#")
        assert type_of.domains == [iri("Dog")]
        assert type_of.ranges == [iri("Species")]
        assert registry.get_languages() == frozenset({"fr"})

    def test_undeclared_range_registered(self, undeclared_range_ttl):
        """Property endpoints always resolve after loading."""
        registry = load(undeclared_range_ttl).registry

        city = registry.get_node_for_iri(URIRef("http://external.org/City"))
        assert city.external is True

    def test_reserved_classes_skipped(self, simple_ttl):
        """Vocabulary terms are never registered as user classes."""
        registry = load(simple_ttl).registry

        for reserved in (OWL.Class, OWL.Thing, RDFS.Class):
            assert reserved not in registry.get_class_map()

    def test_xsd_range_of_object_property_is_datatype(self, shared_xsd_range_ttl, iri):
        """An XSD range stays a datatype whichever property kind mentions it first."""
        registry = load(shared_xsd_range_ttl).registry

        assert XSD.string in registry.get_datatype_map()
        assert XSD.string not in registry.get_class_map()
        assert registry.get_node_for_iri(XSD.string).node_type == "rdfs:Datatype"
        assert registry.get_object_property_for_iri(iri("code")).ranges == [XSD.string]

    def test_punned_class_stays_in_class_table(self, punning_ttl, iri):
        """A class reused as a property keeps its class entry."""
        registry = load(punning_ttl).registry

        assert iri("Parent") in registry.get_class_map()
        assert iri("Parent") in registry.get_object_property_map()
        assert registry.get_object_property_for_iri(iri("hasParent")).ranges == [iri("Parent")]
