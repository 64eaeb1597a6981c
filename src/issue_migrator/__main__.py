from issue_migrator.main import main

if __name__ == "__main__":
    raise SystemExit(main())
