"""Domain-level policies and business rules.

Horse field rules, the role policy and the plain records handed out by the
repositories live here, independent from the HTTP and persistence layers.
"""
