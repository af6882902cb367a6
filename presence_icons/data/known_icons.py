"""Bundled file extension and language tables for the static icon resolver.

KNOWN_EXTENSIONS keys are either a literal file name suffix or a delimited
regular expression in ``/pattern/flags`` form. Keys are tried in the order
they appear here and the first match wins, so more specific keys come first.
Values are an icon identifier or a ``{"image": ...}`` record.
"""

KNOWN_EXTENSIONS: dict[str, str | dict[str, str]] = {
    "/^\\.?(babelrc|babel\\.config)(\\.(js|json|cjs|mjs))?$/i": {"image": "babel"},
    "/^\\.?eslint(rc|ignore|\\.config)(\\.(js|json|yml|yaml|cjs|mjs))?$/i": {"image": "eslint"},
    "/^\\.?prettier(rc|ignore|\\.config)(\\.(js|json|yml|yaml|cjs|mjs))?$/i": {"image": "prettier"},
    "/^docker-compose.*\\.ya?ml$/i": {"image": "docker"},
    "/^dockerfile(\\..*)?$/i": {"image": "docker"},
    "/^\\.dockerignore$/i": {"image": "docker"},
    "/^\\.git(ignore|attributes|modules|keep)$/i": {"image": "git"},
    "/^tsconfig(\\..*)?\\.json$/i": {"image": "tsconfig"},
    "/^jsconfig(\\..*)?\\.json$/i": {"image": "jsconfig"},
    "/^package(-lock)?\\.json$/i": {"image": "npm"},
    "/^yarn\\.lock$/i": {"image": "yarn"},
    "/^pnpm-(lock|workspace)\\.yaml$/i": {"image": "pnpm"},
    "/^webpack(\\..*)?\\.config\\.(js|ts|cjs|mjs)$/i": {"image": "webpack"},
    "/^vite\\.config\\.(js|ts|cjs|mjs)$/i": {"image": "vite"},
    "/^makefile$/i": {"image": "makefile"},
    "/^cmakelists\\.txt$/i": {"image": "cmake"},
    "/^(readme|changelog|contributing)(\\..*)?$/i": {"image": "markdown"},
    "/^(license|licence|copying)(\\..*)?$/i": {"image": "license"},
    "/^\\.env(\\..*)?$/i": {"image": "env"},
    "/^\\.editorconfig$/i": {"image": "editorconfig"},
    "/^(pyproject\\.toml|setup\\.py|setup\\.cfg|requirements.*\\.txt)$/i": {"image": "python"},
    "/^cargo\\.(toml|lock)$/i": {"image": "cargo"},
    "/^go\\.(mod|sum)$/i": {"image": "go"},
    "/^gemfile(\\.lock)?$/i": {"image": "ruby"},
    "/\\.test\\.(js|jsx|ts|tsx)$/i": {"image": "test"},
    "/\\.spec\\.(js|jsx|ts|tsx)$/i": {"image": "test"},
    ".d.ts": {"image": "typescript-def"},
    ".ts": {"image": "ts"},
    ".mts": {"image": "ts"},
    ".cts": {"image": "ts"},
    ".tsx": {"image": "react"},
    ".jsx": {"image": "react"},
    ".js": {"image": "js"},
    ".mjs": {"image": "js"},
    ".cjs": {"image": "js"},
    ".json": {"image": "json"},
    ".jsonc": {"image": "json"},
    ".json5": {"image": "json"},
    ".vue": {"image": "vue"},
    ".svelte": {"image": "svelte"},
    ".astro": {"image": "astro"},
    ".html": {"image": "html"},
    ".htm": {"image": "html"},
    ".css": {"image": "css"},
    ".scss": {"image": "scss"},
    ".sass": {"image": "scss"},
    ".less": {"image": "less"},
    ".styl": {"image": "stylus"},
    ".md": {"image": "markdown"},
    ".mdx": {"image": "markdown"},
    ".rst": {"image": "text"},
    ".txt": {"image": "text"},
    ".py": {"image": "python"},
    ".pyi": {"image": "python"},
    ".pyw": {"image": "python"},
    ".ipynb": {"image": "jupyter"},
    ".rb": {"image": "ruby"},
    ".erb": {"image": "ruby"},
    ".go": {"image": "go"},
    ".rs": {"image": "rust"},
    ".java": {"image": "java"},
    ".kt": {"image": "kotlin"},
    ".kts": {"image": "kotlin"},
    ".scala": {"image": "scala"},
    ".groovy": {"image": "groovy"},
    ".gradle": {"image": "gradle"},
    ".c": {"image": "c"},
    ".h": {"image": "c"},
    ".cpp": {"image": "cpp"},
    ".cc": {"image": "cpp"},
    ".cxx": {"image": "cpp"},
    ".hpp": {"image": "cpp"},
    ".cs": {"image": "csharp"},
    ".csproj": {"image": "csharp"},
    ".fs": {"image": "fsharp"},
    ".swift": {"image": "swift"},
    ".m": {"image": "objc"},
    ".dart": {"image": "dart"},
    ".php": {"image": "php"},
    ".lua": {"image": "lua"},
    ".pl": {"image": "perl"},
    ".pm": {"image": "perl"},
    ".r": {"image": "r"},
    ".jl": {"image": "julia"},
    ".ex": {"image": "elixir"},
    ".exs": {"image": "elixir"},
    ".erl": {"image": "erlang"},
    ".hs": {"image": "haskell"},
    ".clj": {"image": "clojure"},
    ".elm": {"image": "elm"},
    ".ml": {"image": "ocaml"},
    ".zig": {"image": "zig"},
    ".nim": {"image": "nim"},
    ".sh": {"image": "shell"},
    ".bash": {"image": "shell"},
    ".zsh": {"image": "shell"},
    ".fish": {"image": "shell"},
    ".ps1": {"image": "powershell"},
    ".bat": {"image": "batch"},
    ".cmd": {"image": "batch"},
    ".sql": {"image": "sql"},
    ".graphql": {"image": "graphql"},
    ".gql": {"image": "graphql"},
    ".proto": {"image": "protobuf"},
    ".yml": {"image": "yaml"},
    ".yaml": {"image": "yaml"},
    ".toml": {"image": "toml"},
    ".ini": {"image": "config"},
    ".cfg": {"image": "config"},
    ".conf": {"image": "config"},
    ".xml": {"image": "xml"},
    ".csv": {"image": "csv"},
    ".tf": {"image": "terraform"},
    ".nix": {"image": "nix"},
    ".lock": {"image": "lock"},
    ".log": {"image": "log"},
    ".svg": {"image": "svg"},
    "/\\.(png|jpe?g|gif|webp|bmp|ico|avif)$/i": {"image": "image"},
    "/\\.(zip|tar|gz|tgz|bz2|xz|7z|rar)$/i": {"image": "zip"},
    ".pdf": {"image": "pdf"},
}

KNOWN_LANGUAGES: list[dict[str, str]] = [
    {"language": "c", "image": "c"},
    {"language": "cpp", "image": "cpp"},
    {"language": "csharp", "image": "csharp"},
    {"language": "css", "image": "css"},
    {"language": "dart", "image": "dart"},
    {"language": "dockerfile", "image": "docker"},
    {"language": "elixir", "image": "elixir"},
    {"language": "go", "image": "go"},
    {"language": "graphql", "image": "graphql"},
    {"language": "html", "image": "html"},
    {"language": "java", "image": "java"},
    {"language": "javascript", "image": "js"},
    {"language": "javascriptreact", "image": "react"},
    {"language": "json", "image": "json"},
    {"language": "jsonc", "image": "json"},
    {"language": "kotlin", "image": "kotlin"},
    {"language": "less", "image": "less"},
    {"language": "lua", "image": "lua"},
    {"language": "makefile", "image": "makefile"},
    {"language": "markdown", "image": "markdown"},
    {"language": "php", "image": "php"},
    {"language": "plaintext", "image": "text"},
    {"language": "powershell", "image": "powershell"},
    {"language": "python", "image": "python"},
    {"language": "ruby", "image": "ruby"},
    {"language": "rust", "image": "rust"},
    {"language": "scss", "image": "scss"},
    {"language": "shellscript", "image": "shell"},
    {"language": "sql", "image": "sql"},
    {"language": "swift", "image": "swift"},
    {"language": "toml", "image": "toml"},
    {"language": "typescript", "image": "ts"},
    {"language": "typescriptreact", "image": "react"},
    {"language": "vue", "image": "vue"},
    {"language": "xml", "image": "xml"},
    {"language": "yaml", "image": "yaml"},
]
