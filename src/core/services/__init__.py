"""Services of the core: parser, aligner, predicate table and transform engine."""
