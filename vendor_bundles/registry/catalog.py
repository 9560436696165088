"""Built-in table of vendor bundles staged from node_modules."""

from __future__ import annotations

from typing import Dict

from ..schemas.bundle import BundleSpec

VENDOR_DEST = "vendor"

REACT_BUNDLES: Dict[str, BundleSpec] = {
    "react": BundleSpec(
        src="node_modules/react/umd",
        include=("react.production.min.js",),
        dest=VENDOR_DEST,
    ),
    "reactDom": BundleSpec(
        src="node_modules/react-dom/umd",
        include=("react-dom.production.min.js",),
        dest=VENDOR_DEST,
    ),
}

BUNDLES: Dict[str, BundleSpec] = {
    **REACT_BUNDLES,
    "qrcodejs": BundleSpec(
        src="node_modules/qrcodejs",
        include=("qrcode.min.js",),
        dest=VENDOR_DEST,
    ),
    "tablesorter": BundleSpec(
        src="node_modules/tablesorter/dist/js",
        include=("jquery.tablesorter.min.js",),
        dest=VENDOR_DEST,
    ),
    "chai": BundleSpec(
        src="node_modules/chai",
        include=("chai.js",),
        dest=VENDOR_DEST,
    ),
    "chai-dom": BundleSpec(
        src="node_modules/chai-dom",
        include=("chai-dom.js",),
        dest=VENDOR_DEST,
    ),
    "mocha": BundleSpec(
        src="node_modules/mocha",
        include=("mocha.css", "mocha.js"),
        dest=VENDOR_DEST,
    ),
    "core-js": BundleSpec(
        src="node_modules/core-js/client",
        include=("core.js",),
        dest=VENDOR_DEST,
    ),
    "ua-parser-js": BundleSpec(
        src="node_modules/ua-parser-js/dist",
        include=("ua-parser.min.js",),
        dest=VENDOR_DEST,
    ),
    "moment": BundleSpec(
        src="node_modules/moment/min",
        include=("moment.min.js",),
        dest=VENDOR_DEST,
    ),
    "moment-range": BundleSpec(
        src="node_modules/moment-range/dist",
        include=("moment-range.js",),
        dest=VENDOR_DEST,
    ),
    "simple-statistics": BundleSpec(
        src="node_modules/simple-statistics/dist",
        include=("simple-statistics.min.js",),
        dest=VENDOR_DEST,
    ),
    "@cliqz/adblocker": BundleSpec(
        src="node_modules/@cliqz/adblocker",
        include=("adblocker.umd.js", "adblocker-cosmetics.umd.js"),
        dest=VENDOR_DEST,
    ),
    # Whole dist directory, staged under its own name.
    "cliqz-history": BundleSpec(
        src="node_modules/cliqz-history/dist",
        dest="cliqz-history",
    ),
    "@cliqz-oss/dexie": BundleSpec(
        src="node_modules/@cliqz-oss/dexie/dist",
        include=("dexie.min.js",),
        dest=VENDOR_DEST,
    ),
    "@cliqz-oss/pouchdb": BundleSpec(
        src="node_modules/@cliqz-oss/pouchdb/dist",
        include=("pouchdb.js",),
        dest=VENDOR_DEST,
    ),
    "jquery": BundleSpec(
        src="node_modules/jquery/dist",
        include=("jquery.min.js",),
        dest=VENDOR_DEST,
    ),
    "handlebars": BundleSpec(
        src="node_modules/handlebars/dist",
        include=("handlebars.min.js",),
        dest=VENDOR_DEST,
    ),
    "mathjs": BundleSpec(
        src="node_modules/mathjs/dist",
        include=("math.min.js",),
        dest=VENDOR_DEST,
    ),
    "rxjs": BundleSpec(
        src="node_modules/rxjs/bundles",
        include=("Rx.min.js",),
        dest=VENDOR_DEST,
    ),
    "pako": BundleSpec(
        src="node_modules/pako/dist",
        include=("pako.min.js",),
        dest=VENDOR_DEST,
    ),
    "tooltipster-js": BundleSpec(
        src="node_modules/tooltipster/dist/js",
        include=("tooltipster.bundle.min.js",),
        dest=VENDOR_DEST,
    ),
    "tooltipster-css": BundleSpec(
        src="node_modules/tooltipster/dist/css",
        include=("tooltipster.bundle.min.css",),
        dest=VENDOR_DEST,
    ),
    "tooltipster-sideTip-theme": BundleSpec(
        src="node_modules/tooltipster/dist/css/plugins/tooltipster/sideTip/themes",
        include=("tooltipster-sideTip-shadow.min.css",),
        dest=VENDOR_DEST,
    ),
    "tldjs": BundleSpec(
        src="node_modules/tldjs",
        include=("tld.min.js",),
        dest=VENDOR_DEST,
    ),
}
