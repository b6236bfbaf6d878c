"""Render nested JSON parameter documentation as an HTML table with merged cells.

Submodules:
  config       -- defaults, leaf signature, labels and CSS (.env overrides)
  errors       -- exception hierarchy
  schema       -- LeafDetail, Cell and Grid Pydantic models
  classifiers  -- leaf/branch classification and leaf payload extraction
  ordering     -- child-key ordering and the source key-order index
  detail       -- description-column markup for a leaf
  layout       -- tree-to-grid layout with first-child folding
  render       -- HTML table assembly
  pipeline     -- load, convert and save
  cli          -- command-line entry point
"""
