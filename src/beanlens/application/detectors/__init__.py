"""Bean and injection-point detectors."""
