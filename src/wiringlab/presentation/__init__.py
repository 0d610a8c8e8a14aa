"""Entry points printing ``Result: <value>`` for each wiring strategy.

* ``static``: concrete types are fixed in code.
* ``dynamic``: type names come from a text resource and are resolved
  through the type registry.
* ``declarative_xml``: components and references are declared in XML.
* ``declarative_annotation``: components declare themselves with
  ``@component`` and are discovered by scanning modules.
"""
