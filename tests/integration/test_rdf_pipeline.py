"""Integration tests for the ontology-to-VOWL conversion pipeline.

These tests run the complete workflow: parse, load into a fresh registry,
complete missing endpoints, serialize.
"""

import json

import pytest

from owlgraph.core import convert_content, convert_file
from owlgraph.registry import DuplicatePolicy, RegistryConfig


RDF_XML = """<?xml version="1.0"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:rdfs="http://www.w3.org/2000/01/rdf-schema#"
         xmlns:owl="http://www.w3.org/2002/07/owl#">
  <owl:Class rdf:about="http://example.org/Person">
    <rdfs:label xml:lang="en">Person</rdfs:label>
  </owl:Class>
</rdf:RDF>
"""


@pytest.mark.integration
class TestConversionPipeline:
    """End-to-end conversion runs."""

    def test_convert_content(self, simple_ttl):
        """Turtle content converts to a complete document."""
        result = convert_content(simple_ttl)

        assert result.statistics["classes"] == 2
        assert result.statistics["assigned_ids"] == 7
        assert result.triple_count > 0
        assert json.loads(json.dumps(result.document)) == result.document

    def test_convert_file(self, temp_ttl_file):
        """The source path is recorded in the result summary."""
        result = convert_file(temp_ttl_file)

        assert result.source_path == temp_ttl_file
        assert temp_ttl_file in result.get_summary()

    def test_convert_rdf_xml(self):
        """Other rdflib formats go through the same registry."""
        result = convert_content(RDF_XML, rdf_format="xml")

        assert result.statistics["classes"] == 1
        assert result.document["header"]["languages"] == ["en"]

    def test_missing_endpoints_synthesized(self, missing_domain_ttl):
        """Thing synthesis runs as part of the pipeline."""
        result = convert_content(missing_domain_ttl)

        node_types = {c["type"] for c in result.document["class"]}
        assert "owl:Thing" in node_types
        assert result.statistics["synthetic_iris"] == 1
        for attribute in result.document["propertyAttribute"]:
            assert "domain" in attribute and "range" in attribute

    def test_each_run_has_its_own_registry(self, simple_ttl):
        """Numbering restarts at 0 for every run."""
        first = convert_content(simple_ttl)
        second = convert_content(simple_ttl)

        assert first.document == second.document

    def test_reject_policy_passes_for_clean_ontology(self, simple_ttl):
        """A well-formed ontology never triggers duplicate rejection."""
        config = RegistryConfig(duplicate_policy=DuplicatePolicy.REJECT)

        result = convert_content(simple_ttl, config=config)

        assert result.statistics["entities"] == 7
