"""
Property-based testing using Hypothesis.

This package contains property tests that verify mathematical invariants
hold across randomly generated inputs.

Modules:
    test_gaussian_properties: erfc, normal CDF/quantile and Gaussian algebra
    test_option_properties: analytic pricing invariants (bounds, parity, monotonicity)
    test_mc_properties: path-by-path Monte Carlo invariants
"""
