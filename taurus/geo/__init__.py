"""PostGIS-style geometries with WKT and GeoJSON encoding."""