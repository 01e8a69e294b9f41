from modal_engine.adapters.textual.app import main

if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
