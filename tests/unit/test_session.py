"""
Unit tests for session management.

Tests Session, AccountCredentials, CredentialCache and MemorySession.
"""
import itertools
from pathlib import Path

import pytest

from b2fs.core.session import (
    Session,
    AccountCredentials,
    SessionStorage,
    CredentialCache,
    MemorySession,
    ACCOUNT_ID_MAX_LEN,
    APP_KEY_MAX_LEN,
    TOKEN_MAX_LEN,
)


class TestSession:
    """Tests for the Session model."""
    
    def test_is_valid(self, sample_session):
        """Test a fully populated session is valid."""
        assert sample_session.is_valid() is True
    
    @pytest.mark.parametrize('fields', [
        ('', 'a', 'd'),
        ('t', '', 'd'),
        ('t', 'a', ''),
    ])
    def test_empty_field_is_invalid(self, fields):
        """Test any empty field invalidates the session."""
        assert Session(*fields).is_valid() is False
    
    def test_fields_are_truncated(self):
        """Test oversized fields are silently truncated."""
        session = Session('t' * 500, 'a' * 128, 'd')
        
        assert len(session.authorization_token) == TOKEN_MAX_LEN
        assert len(session.api_base_url) == TOKEN_MAX_LEN
        assert session.download_base_url == 'd'
    
    def test_truncation_keeps_whole_characters(self):
        """Test truncation never splits a multi-byte character."""
        session = Session('é' * 100, 'a', 'd')
        
        assert session.authorization_token == 'é' * 63
    
    def test_immutable(self, sample_session):
        """Test sessions cannot be modified in place."""
        with pytest.raises(AttributeError):
            sample_session.authorization_token = 'other'
    
    def test_record_round_trip(self, sample_session):
        """Test record serialization."""
        record = sample_session.to_record()
        
        assert record == 'tok123\nhttps://api.example\nhttps://dl.example\n'
        assert Session.from_record(record) == sample_session
    
    def test_from_record_short(self):
        """Test missing tokens leave fields empty."""
        session = Session.from_record('tok\n')
        
        assert session == Session('tok', '', '')
        assert session.is_valid() is False
    
    def test_from_record_keeps_spaces(self):
        """Test records are split by line, not by whitespace."""
        session = Session.from_record('tok\nhttps://api x\nhttps://dl\n')

        assert session == Session('tok', 'https://api x', 'https://dl')

    def test_is_recordable(self, sample_session):
        """Test line breaks inside a field make a session unrecordable."""
        assert sample_session.is_recordable() is True
        assert Session('tok', 'a\r\nb', 'd').is_recordable() is False

    def test_repr_hides_token(self, sample_session):
        """Test the token never appears in repr."""
        assert 'tok123' not in repr(sample_session)


class TestAccountCredentials:
    """Tests for the AccountCredentials model."""
    
    def test_defaults_empty(self):
        """Test default credentials are empty."""
        credentials = AccountCredentials()
        
        assert credentials.account_id == ''
        assert credentials.application_key == ''
    
    def test_fields_bounded_independently(self):
        """Test each field is truncated to its own bound."""
        credentials = AccountCredentials('i' * 40, 'k' * 100)
        
        assert len(credentials.account_id) == ACCOUNT_ID_MAX_LEN
        assert len(credentials.application_key) == APP_KEY_MAX_LEN
    
    def test_repr_hides_key(self):
        """Test the application key never appears in repr."""
        assert 'secret' not in repr(AccountCredentials('ABC', 'secret'))


class TestMemorySession:
    """Tests for MemorySession storage."""
    
    def test_implements_protocol(self):
        """Test that MemorySession implements SessionStorage."""
        assert isinstance(MemorySession(), SessionStorage)
    
    def test_save_and_load(self, sample_session):
        """Test saving and loading a session."""
        storage = MemorySession()
        storage.save(sample_session)
        
        assert storage.load() == sample_session
    
    def test_invalid_session_not_loaded(self):
        """Test an invalid session reads as a miss."""
        storage = MemorySession(Session('t', '', 'd'))
        
        assert storage.exists() is True
        assert storage.load() is None
    
    def test_delete(self, sample_session):
        """Test deleting session."""
        storage = MemorySession(sample_session)
        storage.delete()
        
        assert storage.exists() is False
        assert storage.load() is None


class TestCredentialCache:
    """Tests for the file-backed CredentialCache."""
    
    def test_implements_protocol(self, cache):
        """Test that CredentialCache implements SessionStorage."""
        assert isinstance(cache, SessionStorage)
    
    def test_path(self, cache, tmp_path):
        """Test cache file location."""
        assert cache.path == tmp_path / 'b2fs_cache.txt'
    
    def test_load_missing_file(self, cache):
        """Test a missing cache file is a miss."""
        assert cache.exists() is False
        assert cache.load() is None
    
    def test_round_trip(self, cache, sample_session):
        """Test save followed by load returns an equal session."""
        cache.save(sample_session)
        
        assert cache.load() == sample_session
    
    def test_save_format(self, cache, sample_session):
        """Test the on-disk record format."""
        cache.save(sample_session)
        
        assert cache.path.read_text() == 'tok123\nhttps://api.example\nhttps://dl.example\n'
    
    def test_round_trip_with_spaces(self, cache):
        """Test fields containing spaces are read back unchanged."""
        session = Session('tok en', 'https://api x', 'https://dl')
        cache.save(session)

        assert cache.load() == session

    def test_multiline_field_not_cached(self, cache, sample_session):
        """Test a session with a line break is never written or read back."""
        cache.save(sample_session)

        cache.save(Session('tok', 'https://api\nx', 'https://dl'))

        assert cache.exists() is False
        assert cache.load() is None

    def test_save_overwrites(self, cache, sample_session):
        """Test save replaces the previous record wholesale."""
        cache.save(Session('old-token-that-is-longer', 'old-api', 'old-dl'))
        cache.save(sample_session)
        
        assert cache.load() == sample_session
    
    @pytest.mark.parametrize(
        'token,api_url,download_url',
        list(itertools.product(['', 'tok'], ['', 'https://api'], ['', 'https://dl']))
    )
    def test_load_requires_all_fields(self, cache, token, api_url, download_url):
        """Test load succeeds iff all three stored fields are non-empty."""
        cache.path.write_text(f"{token}\n{api_url}\n{download_url}\n")
        
        loaded = cache.load()
        
        if token and api_url and download_url:
            assert loaded == Session(token, api_url, download_url)
        else:
            assert loaded is None
    
    def test_load_truncates_fields(self, cache):
        """Test oversized cached fields are truncated on read."""
        cache.path.write_text(f"{'t' * 300}\napi\ndl\n")
        
        assert len(cache.load().authorization_token) == TOKEN_MAX_LEN
    
    def test_delete(self, cache, sample_session):
        """Test deleting the cache file."""
        cache.save(sample_session)
        assert cache.exists() is True
        
        cache.delete()
        
        assert cache.exists() is False
        assert cache.load() is None
    
    def test_save_to_missing_directory_is_silent(self, tmp_path, sample_session):
        """Test write failures are not raised."""
        cache = CredentialCache(tmp_path / 'missing')
        
        cache.save(sample_session)
        
        assert cache.load() is None


class TestCacheDirectoryResolution:
    """Tests for temp directory resolution."""
    
    def test_env_priority(self, tmp_path):
        """Test TMPDIR wins over TMP, TEMP and TEMPDIR."""
        environ = {
            'TEMPDIR': '/tempdir',
            'TEMP': '/temp',
            'TMP': '/tmp-var',
            'TMPDIR': str(tmp_path),
        }
        
        assert CredentialCache(environ=environ).resolve_directory() == tmp_path
    
    @pytest.mark.parametrize('name', ['TMP', 'TEMP', 'TEMPDIR'])
    def test_each_variable(self, name, tmp_path):
        """Test each temp variable is honoured."""
        cache = CredentialCache(environ={name: str(tmp_path)})
        
        assert cache.resolve_directory() == tmp_path
    
    def test_order(self):
        """Test the lookup order between lower-priority variables."""
        environ = {'TEMPDIR': '/c', 'TEMP': '/b', 'TMP': '/a'}
        
        assert CredentialCache(environ=environ).resolve_directory() == Path('/a')
    
    def test_explicit_directory_wins(self, tmp_path):
        """Test an explicit base directory skips the environment."""
        cache = CredentialCache(tmp_path, environ={'TMPDIR': '/elsewhere'})
        
        assert cache.resolve_directory() == tmp_path
    
    def test_fallback_when_readable(self, monkeypatch):
        """Test /tmp is used when no variable is set and it is readable."""
        monkeypatch.setattr('b2fs.core.session.file_session.os.access', lambda path, mode: True)
        
        assert CredentialCache(environ={}).resolve_directory() == Path('/tmp')
    
    def test_no_directory(self, monkeypatch, sample_session):
        """Test load misses and save is a no-op without a directory."""
        monkeypatch.setattr('b2fs.core.session.file_session.os.access', lambda path, mode: False)
        cache = CredentialCache(environ={})
        
        assert cache.resolve_directory() is None
        assert cache.path is None
        assert cache.load() is None
        cache.save(sample_session)
        assert cache.exists() is False
